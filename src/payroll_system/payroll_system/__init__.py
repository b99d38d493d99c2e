"""Payroll System package.

Feature modules (attendance, hours, employees, payroll) follow the same
shape: immutable models, repository protocols, service classes holding the
business rules, and a thin Flask/CLI layer on top.
"""
