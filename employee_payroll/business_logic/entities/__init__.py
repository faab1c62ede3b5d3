# employee_payroll/business_logic/entities/__init__.py
from .base_entity import BaseEntity
from .employee_entity import EmployeeEntity, FullTimeEmployeeEntity, PartTimeEmployeeEntity

__all__ = [
    "BaseEntity", "EmployeeEntity", "FullTimeEmployeeEntity", "PartTimeEmployeeEntity",
]
