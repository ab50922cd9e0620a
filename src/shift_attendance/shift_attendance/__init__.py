"""Shift Attendance package.

This package is organized by feature modules (employees, shifts, approvals,
roster, payroll, ...) with a thin Flask controller layer on top of the
service/repository layers.
"""
