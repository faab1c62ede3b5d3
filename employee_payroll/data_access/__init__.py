# employee_payroll/data_access/__init__.py

from .roster_repository import RosterRepository
