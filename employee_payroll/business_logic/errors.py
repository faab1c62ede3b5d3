# employee_payroll/business_logic/errors.py
"""
Error kinds of the payroll application.

Input parsing and roster checks hand these back inside an ``Err`` result
instead of raising them; entities raise ``ValidationError`` only when they are
constructed directly with invalid data.
"""

class PayrollError(ValueError):
    """Base class for every user-recoverable payroll error."""


class FormatError(PayrollError):
    """A number was expected but the text could not be parsed as one."""


class ValidationError(PayrollError):
    """Empty name or negative numeric value."""


class DuplicateIdError(PayrollError):
    """An employee with the given ID is already on the roster."""

    def __init__(self, message: str, employee_id: int):
        super().__init__(message)
        self.employee_id = employee_id


class NotFoundError(PayrollError):
    """No employee with the given ID is on the roster."""

    def __init__(self, message: str, employee_id: int):
        super().__init__(message)
        self.employee_id = employee_id
