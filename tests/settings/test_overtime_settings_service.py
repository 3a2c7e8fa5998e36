import pytest

from src.roster_attendance.roster_attendance.core.exceptions import InvalidThreshold
from src.roster_attendance.roster_attendance.settings.memory_settings_repository import InMemorySettingsRepository
from src.roster_attendance.roster_attendance.settings.service import OvertimeSettingsService


def test_default_threshold_until_written():
    svc = OvertimeSettingsService(InMemorySettingsRepository())
    assert svc.get_threshold() == 8

    assert svc.set_threshold(10) == 10
    assert svc.get_threshold() == 10


def test_configured_default():
    assert OvertimeSettingsService(InMemorySettingsRepository(), default_threshold=9).get_threshold() == 9


@pytest.mark.parametrize("value", [0, 24, "12"])
def test_accepts_whole_hours_in_range(value):
    repo = InMemorySettingsRepository()
    OvertimeSettingsService(repo).set_threshold(value)
    assert repo.get_overtime_threshold() == int(value)


@pytest.mark.parametrize("value", [-1, 25, 7.5, "abc", None, True])
def test_rejects_invalid_threshold(value):
    repo = InMemorySettingsRepository(overtime_threshold=8)
    with pytest.raises(InvalidThreshold):
        OvertimeSettingsService(repo).set_threshold(value)
    assert repo.get_overtime_threshold() == 8
