# employee_payroll/business_logic/entities/employee_entity.py
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from .base_entity import BaseEntity
from employee_payroll.business_logic import payroll_calculator
from employee_payroll.business_logic.errors import ValidationError
from employee_payroll.constants import EmployeeType, MSG_NEGATIVE_SALARY, MSG_NEGATIVE_VALUES


def _as_decimal(value: Any, message: str) -> Decimal:
    # floats go through str() so 15.5 becomes Decimal('15.5'), not its binary expansion
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError(message)
    if not amount.is_finite() or amount < 0:
        raise ValidationError(message)
    return amount


class _EmployeeMixin:
    """Salary and description helpers shared by both employee variants."""

    def compute_salary(self) -> Decimal:
        return payroll_calculator.compute_salary(self) # type: ignore[arg-type]

    def describe(self) -> str:
        return payroll_calculator.describe(self) # type: ignore[arg-type]


@dataclass(frozen=True)
class FullTimeEmployeeEntity(_EmployeeMixin, BaseEntity):
    monthly_salary: Decimal
    employee_type: EmployeeType = field(default=EmployeeType.FULL_TIME, init=False)

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "monthly_salary", _as_decimal(self.monthly_salary, MSG_NEGATIVE_SALARY))


@dataclass(frozen=True)
class PartTimeEmployeeEntity(_EmployeeMixin, BaseEntity):
    hours_worked: int
    hourly_rate: Decimal
    employee_type: EmployeeType = field(default=EmployeeType.PART_TIME, init=False)

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.hours_worked, bool) or not isinstance(self.hours_worked, int) or self.hours_worked < 0:
            raise ValidationError(MSG_NEGATIVE_VALUES)
        object.__setattr__(self, "hourly_rate", _as_decimal(self.hourly_rate, MSG_NEGATIVE_VALUES))


EmployeeEntity = Union[FullTimeEmployeeEntity, PartTimeEmployeeEntity]
