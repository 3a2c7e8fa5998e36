"""Roster Attendance package.

This package is organized by feature modules (employees, attendance, hours,
reports, ...) with a thin Flask controller layer over service/repository layers.
"""
