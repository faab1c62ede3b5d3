# employee_payroll/business_logic/payroll_calculator.py
"""
Salary computation for the two employee variants.

The variants form a tagged union: every employee carries an ``employee_type``
tag and the formula is looked up by that tag.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Callable, Dict, TYPE_CHECKING

from employee_payroll.config import SALARY_DECIMAL_PLACES
from employee_payroll.constants import EmployeeType, DESCRIBE_FORMAT

if TYPE_CHECKING:
    from employee_payroll.business_logic.entities.employee_entity import EmployeeEntity

_SALARY_QUANTUM = Decimal(1).scaleb(-SALARY_DECIMAL_PLACES) # Decimal('0.01')


def _full_time_salary(employee) -> Decimal:
    return employee.monthly_salary

def _part_time_salary(employee) -> Decimal:
    hours, rate = employee.hours_worked, employee.hourly_rate
    with localcontext() as ctx:
        # wide enough for the exact product
        ctx.prec = max(ctx.prec, len(str(abs(hours))) + len(rate.as_tuple().digits))
        return hours * rate

_SALARY_FORMULAS: Dict[EmployeeType, Callable[..., Decimal]] = {
    EmployeeType.FULL_TIME: _full_time_salary,
    EmployeeType.PART_TIME: _part_time_salary,
}


def compute_salary(employee: 'EmployeeEntity') -> Decimal:
    """Returns the pay of an employee; a pure function of the record's own fields."""
    return _SALARY_FORMULAS[employee.employee_type](employee)


def format_salary(amount: Decimal) -> str:
    with localcontext() as ctx:
        # quantize must keep every integer digit plus the decimal places
        ctx.prec = max(ctx.prec, amount.adjusted() + SALARY_DECIMAL_PLACES + 2)
        ctx.rounding = ROUND_HALF_UP
        return str(amount.quantize(_SALARY_QUANTUM))


def describe(employee: 'EmployeeEntity') -> str:
    """e.g. 'Employee [Name: Alice, ID: 1, Salary: 3000.00]'"""
    return DESCRIBE_FORMAT.format(name=employee.name,
                                  id=employee.id,
                                  salary=format_salary(compute_salary(employee)))
