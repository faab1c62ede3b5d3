# employee_payroll/presentation/payroll_flows.py
"""
The three user-triggered flows: add, remove and display employees.

A flow runs to completion or aborts before the next one starts. Every input is
parsed and validated before the roster is touched, so an aborted flow (error
or cancelled prompt) never leaves a partial change behind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from employee_payroll.app_context import ApplicationContext
from employee_payroll.business_logic import input_parsing
from employee_payroll.business_logic.entities.employee_entity import (
    EmployeeEntity, FullTimeEmployeeEntity, PartTimeEmployeeEntity)
from employee_payroll.business_logic.errors import PayrollError
from employee_payroll.business_logic.result import Err
from employee_payroll.constants import (
    EmployeeType, EMPLOYEE_TYPE_CHOICES,
    PROMPT_EMPLOYEE_TYPE, PROMPT_NAME, PROMPT_ID, PROMPT_MONTHLY_SALARY,
    PROMPT_HOURS_WORKED, PROMPT_HOURLY_RATE, PROMPT_REMOVE_ID,
    MSG_NEGATIVE_SALARY, MSG_NEGATIVE_VALUES, MSG_UNEXPECTED_ERROR)
from employee_payroll.presentation.user_interface import UserInterface
import logging

logger = logging.getLogger(__name__)

class FlowStatus(Enum):
    COMPLETED = "completed"
    REJECTED = "rejected"     # invalid input, duplicate or unknown ID
    CANCELLED = "cancelled"   # the user closed a prompt
    FAILED = "failed"         # unexpected exception

@dataclass(frozen=True)
class FlowOutcome:
    status: FlowStatus
    error: Optional[Exception] = None
    employee: Optional[EmployeeEntity] = None

    @property
    def completed(self) -> bool:
        return self.status is FlowStatus.COMPLETED


class PayrollFlows:
    def __init__(self, context: ApplicationContext, ui: UserInterface):
        if context is None: raise ValueError("context cannot be None")
        if ui is None: raise ValueError("ui cannot be None")
        self.context = context
        self.ui = ui

    @property
    def employee_manager(self):
        return self.context.employee_manager

    # --- outcomes ---
    def _reject(self, flow: str, failure: Err) -> FlowOutcome:
        logger.warning(f"{flow} flow rejected: {type(failure.error).__name__}: {failure.message}")
        self.ui.show_message(failure.message)
        return FlowOutcome(FlowStatus.REJECTED, error=failure.error)

    def _cancel(self, flow: str, title: str) -> FlowOutcome:
        logger.info(f"{flow} flow cancelled at prompt '{title}'.")
        return FlowOutcome(FlowStatus.CANCELLED)

    def _fail(self, flow: str, error: Exception) -> FlowOutcome:
        logger.error(f"Unexpected error in {flow} flow: {error}", exc_info=True)
        self.ui.show_message(MSG_UNEXPECTED_ERROR.format(error=error))
        return FlowOutcome(FlowStatus.FAILED, error=error)

    # --- flows ---
    def add_employee(self) -> FlowOutcome:
        flow = "Add employee"
        try:
            return self._add_employee(flow)
        except PayrollError as pe: # entity guards, should be unreachable after parsing
            return self._reject(flow, Err(pe))
        except Exception as e:
            return self._fail(flow, e)

    def _add_employee(self, flow: str) -> FlowOutcome:
        choice = self.ui.prompt_choice(PROMPT_EMPLOYEE_TYPE, [t.value for t in EMPLOYEE_TYPE_CHOICES])
        if choice is None or not 0 <= choice < len(EMPLOYEE_TYPE_CHOICES):
            return self._cancel(flow, PROMPT_EMPLOYEE_TYPE)
        employee_type = EMPLOYEE_TYPE_CHOICES[choice]
        logger.debug(f"{flow}: type {employee_type.value} selected.")

        name_text = self.ui.prompt_text(PROMPT_NAME)
        if name_text is None: return self._cancel(flow, PROMPT_NAME)
        name = input_parsing.parse_name(name_text)
        if isinstance(name, Err): return self._reject(flow, name)

        id_text = self.ui.prompt_text(PROMPT_ID)
        if id_text is None: return self._cancel(flow, PROMPT_ID)
        employee_id = input_parsing.parse_int(id_text)
        if isinstance(employee_id, Err): return self._reject(flow, employee_id)

        available = self.employee_manager.ensure_id_available(employee_id.value)
        if isinstance(available, Err): return self._reject(flow, available)

        employee: EmployeeEntity
        if employee_type is EmployeeType.FULL_TIME:
            salary_text = self.ui.prompt_text(PROMPT_MONTHLY_SALARY)
            if salary_text is None: return self._cancel(flow, PROMPT_MONTHLY_SALARY)
            salary = input_parsing.parse_non_negative_decimal(salary_text, MSG_NEGATIVE_SALARY)
            if isinstance(salary, Err): return self._reject(flow, salary)

            employee = FullTimeEmployeeEntity(name=name.value, id=employee_id.value,
                                              monthly_salary=salary.value)
        else:
            # Both prompts are answered before either value is checked
            hours_text = self.ui.prompt_text(PROMPT_HOURS_WORKED)
            if hours_text is None: return self._cancel(flow, PROMPT_HOURS_WORKED)
            rate_text = self.ui.prompt_text(PROMPT_HOURLY_RATE)
            if rate_text is None: return self._cancel(flow, PROMPT_HOURLY_RATE)

            hours = input_parsing.parse_non_negative_int(hours_text, MSG_NEGATIVE_VALUES)
            if isinstance(hours, Err): return self._reject(flow, hours)
            rate = input_parsing.parse_non_negative_decimal(rate_text, MSG_NEGATIVE_VALUES)
            if isinstance(rate, Err): return self._reject(flow, rate)

            employee = PartTimeEmployeeEntity(name=name.value, id=employee_id.value,
                                              hours_worked=hours.value, hourly_rate=rate.value)

        self.employee_manager.add_employee(employee)
        self.display_employees()
        return FlowOutcome(FlowStatus.COMPLETED, employee=employee)

    def remove_employee(self) -> FlowOutcome:
        flow = "Remove employee"
        try:
            id_text = self.ui.prompt_text(PROMPT_REMOVE_ID)
            if id_text is None: return self._cancel(flow, PROMPT_REMOVE_ID)
            employee_id = input_parsing.parse_employee_id(id_text)
            if isinstance(employee_id, Err): return self._reject(flow, employee_id)

            removed = self.employee_manager.remove_employee(employee_id.value)
            if isinstance(removed, Err): return self._reject(flow, removed)

            self.display_employees()
            return FlowOutcome(FlowStatus.COMPLETED)
        except Exception as e:
            return self._fail(flow, e)

    def display_employees(self) -> FlowOutcome:
        try:
            text = self.employee_manager.render_roster()
            self.ui.render_text(text)
        except Exception as e:
            return self._fail("Display employees", e)
        logger.debug(f"Displayed {self.context.roster_repository.count()} employees.")
        return FlowOutcome(FlowStatus.COMPLETED)
