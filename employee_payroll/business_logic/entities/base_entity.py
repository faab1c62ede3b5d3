# employee_payroll/business_logic/entities/base_entity.py
from dataclasses import dataclass

from employee_payroll.business_logic.errors import ValidationError
from employee_payroll.constants import MSG_NAME_EMPTY

@dataclass(frozen=True)
class BaseEntity:
    name: str
    id: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError(MSG_NAME_EMPTY)
