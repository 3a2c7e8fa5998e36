from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of the acting principal, supplied by the identity provider."""

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class EmployeeType(str, Enum):
    """Employment category. Only company staff get a normal/overtime split."""

    COMPANY = "company"
    SUPPLIER = "supplier"

    @property
    def label(self) -> str:
        return {
            EmployeeType.COMPANY: "Company",
            EmployeeType.SUPPLIER: "Supplier",
        }[self]


class Location(str, Enum):
    KUWAIT = "kuwait"
    SAUDI = "saudi"

    @property
    def label(self) -> str:
        return {
            Location.KUWAIT: "Kuwait",
            Location.SAUDI: "Saudi Arabia",
        }[self]


class WorkingStatus(str, Enum):
    """Categorical label of one attendance day."""

    FULLWORK = "fullwork"
    FULLWORK_OVERTIME = "fullworkOvertime"
    PARTIAL_WORK = "partialWork"
    ABSENT = "absent"
    HOLIDAY = "holiday"
    VACATION = "vacation"

    @property
    def is_working(self) -> bool:
        return self in _WORKING

    @property
    def is_off(self) -> bool:
        """Absent, holiday and vacation days carry no timestamps."""
        return self in _OFF

    @property
    def label(self) -> str:
        return {
            WorkingStatus.FULLWORK: "Full Work",
            WorkingStatus.FULLWORK_OVERTIME: "Full Work + Overtime",
            WorkingStatus.PARTIAL_WORK: "Partial Work",
            WorkingStatus.ABSENT: "Absent",
            WorkingStatus.HOLIDAY: "Holiday",
            WorkingStatus.VACATION: "Vacation",
        }[self]


_WORKING = frozenset({WorkingStatus.FULLWORK, WorkingStatus.FULLWORK_OVERTIME, WorkingStatus.PARTIAL_WORK})
_OFF = frozenset({WorkingStatus.ABSENT, WorkingStatus.HOLIDAY, WorkingStatus.VACATION})


class Designation(str, Enum):
    """Job title of a roster entry."""

    ACCOUNTANT = "accountant"
    ADMIN_GENERAL = "adminGeneral"
    ATTENDANT = "attendant"
    CASHIER = "cashier"
    CIVIL_FOREMAN = "civilForeman"
    CIVIL_SUPERVISOR = "civilSupervisor"
    CLEANER = "cleaner"
    CLEANER_SUPERVISOR = "cleanerSupervisor"
    COOK = "cook"
    ELECTRICIAN = "electrician"
    ELECTRICAL_FOREMAN = "electricalForeman"
    ELECTRICIAN_SUPERVISOR = "electricianSupervisor"
    ESTIMATOR_IN_TENDERING = "estimatorInTendering"
    FABRICATOR = "fabricator"
    FORKLIFT_OPERATOR = "forkliftOperator"
    GENERAL_CLERK = "generalClerk"
    GENERAL_HELPER = "generalHelper"
    GENERAL_SUPERVISOR = "generalSupervisor"
    HR_LABOUR_DISCIPLINE = "hrLabourDiscipline"
    HVAC_TECHNICIAN = "hvacTechnician"
    KITCHEN_HELPER = "kitchenHelper"
    LABORER = "laborer"
    LAWNKEEPER = "lawnkeeper"
    LOGISTICS = "logistics"
    MALE_NURSE = "maleNurse"
    MATRON = "matron"
    MECHANIC = "mechanic"
    MECHANICAL_FOREMAN = "mechanicalForeman"
    MECHANICAL_SUPERVISOR = "mechanicalSupervisor"
    OTHER = "other"
    PAINTER = "painter"
    PAINTER_SUPERVISOR = "painterSupervisor"
    PLUMBER = "plumber"
    PLUMBER_HELPER = "plumberHelper"
    PMO_GENERAL_MANAGER = "pmoGeneral_manager"
    PMO_OPERATIONS_DIRECTOR = "pmoOperations_director"
    PROCUREMENT_SPECIALIST = "procurementProcurementSpecialist"
    PROJECT_MANAGER_KUWAIT = "projectManagerKuwait"
    PROJECT_MANAGER_SUPERINTENDENT = "projectManagerSuperIntendent"
    PROJECT_TECHNICAL_MANAGER = "projectTechnical_manager"
    SENIOR_ENGINEER_TENDERING = "seniorEngineerTendering"
    SITE_EXPEDITOR = "siteExpeditor"
    SITE_TIMEKEEPER = "siteTimekeeper"
    SITE_TIMEKEEPER_CLERK = "siteTimekeeperClerk"
    STOREKEEPER = "storekeeper"
    THERAPIST = "therapist"
    WAITER = "waiter"

    @property
    def label(self) -> str:
        return _DESIGNATION_LABELS[self]


_DESIGNATION_LABELS = {
    Designation.ACCOUNTANT: "Accountant",
    Designation.ADMIN_GENERAL: "Admin General",
    Designation.ATTENDANT: "Attendant",
    Designation.CASHIER: "Cashier",
    Designation.CIVIL_FOREMAN: "Civil Foreman",
    Designation.CIVIL_SUPERVISOR: "Civil Supervisor",
    Designation.CLEANER: "Cleaner",
    Designation.CLEANER_SUPERVISOR: "Cleaner Supervisor",
    Designation.COOK: "Cook",
    Designation.ELECTRICIAN: "Electrician",
    Designation.ELECTRICAL_FOREMAN: "Electrical Foreman",
    Designation.ELECTRICIAN_SUPERVISOR: "Electrician Supervisor",
    Designation.ESTIMATOR_IN_TENDERING: "Estimator in Tendering",
    Designation.FABRICATOR: "Fabricator",
    Designation.FORKLIFT_OPERATOR: "Forklift Operator",
    Designation.GENERAL_CLERK: "General Clerk",
    Designation.GENERAL_HELPER: "General Helper",
    Designation.GENERAL_SUPERVISOR: "General Supervisor",
    Designation.HR_LABOUR_DISCIPLINE: "HR Labour Discipline",
    Designation.HVAC_TECHNICIAN: "HVAC Technician",
    Designation.KITCHEN_HELPER: "Kitchen Helper",
    Designation.LABORER: "Laborer",
    Designation.LAWNKEEPER: "Lawnkeeper",
    Designation.LOGISTICS: "Logistics",
    Designation.MALE_NURSE: "Male Nurse",
    Designation.MATRON: "Matron",
    Designation.MECHANIC: "Mechanic",
    Designation.MECHANICAL_FOREMAN: "Mechanical Foreman",
    Designation.MECHANICAL_SUPERVISOR: "Mechanical Supervisor",
    Designation.OTHER: "Other",
    Designation.PAINTER: "Painter",
    Designation.PAINTER_SUPERVISOR: "Painter Supervisor",
    Designation.PLUMBER: "Plumber",
    Designation.PLUMBER_HELPER: "Plumber Helper",
    Designation.PMO_GENERAL_MANAGER: "PMO General Manager",
    Designation.PMO_OPERATIONS_DIRECTOR: "PMO Operations Director",
    Designation.PROCUREMENT_SPECIALIST: "Procurement Specialist",
    Designation.PROJECT_MANAGER_KUWAIT: "Project Manager Kuwait",
    Designation.PROJECT_MANAGER_SUPERINTENDENT: "Project Manager Superintendent",
    Designation.PROJECT_TECHNICAL_MANAGER: "Project Technical Manager",
    Designation.SENIOR_ENGINEER_TENDERING: "Senior Engineer Tendering",
    Designation.SITE_EXPEDITOR: "Site Expeditor",
    Designation.SITE_TIMEKEEPER: "Site Timekeeper",
    Designation.SITE_TIMEKEEPER_CLERK: "Site Timekeeper Clerk",
    Designation.STOREKEEPER: "Storekeeper",
    Designation.THERAPIST: "Therapist",
    Designation.WAITER: "Waiter",
}
