# employee_payroll/business_logic/result.py

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from employee_payroll.business_logic.errors import PayrollError

T = TypeVar('T')

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

@dataclass(frozen=True)
class Err:
    error: PayrollError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.error)

Result = Union[Ok[T], Err]
