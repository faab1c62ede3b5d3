"""
Shared test fixtures for the employee payroll tests.
"""
from decimal import Decimal
from typing import List, Optional

import pytest

from employee_payroll.app_context import ApplicationContext, create_application_context
from employee_payroll.business_logic.employee_manager import EmployeeManager
from employee_payroll.business_logic.entities.employee_entity import (
    FullTimeEmployeeEntity, PartTimeEmployeeEntity)
from employee_payroll.data_access.roster_repository import RosterRepository


class ScriptedUserInterface:
    """
    Stand-in for the Qt dialogs.

    Answers prompts from a queue; None in the queue means the user cancelled.
    Everything asked, shown and rendered is recorded.
    """

    def __init__(self, answers: Optional[list] = None):
        self.answers: list = list(answers or [])
        self.prompts: List[str] = []
        self.messages: List[str] = []
        self.rendered: List[str] = []

    def queue(self, *answers):
        self.answers.extend(answers)
        return self

    def _next(self, title: str):
        self.prompts.append(title)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {title}")
        return self.answers.pop(0)

    def prompt_choice(self, title, options):
        return self._next(title)

    def prompt_text(self, title):
        return self._next(title)

    def show_message(self, text):
        self.messages.append(text)

    def render_text(self, full_text):
        self.rendered.append(full_text)

    @property
    def screen(self) -> Optional[str]:
        return self.rendered[-1] if self.rendered else None


@pytest.fixture
def repository() -> RosterRepository:
    return RosterRepository()


@pytest.fixture
def manager(repository) -> EmployeeManager:
    return EmployeeManager(repository)


@pytest.fixture
def context() -> ApplicationContext:
    return create_application_context()


@pytest.fixture
def ui() -> ScriptedUserInterface:
    return ScriptedUserInterface()


@pytest.fixture
def alice() -> FullTimeEmployeeEntity:
    return FullTimeEmployeeEntity("Alice", 1, Decimal("3000.00"))


@pytest.fixture
def bob() -> PartTimeEmployeeEntity:
    return PartTimeEmployeeEntity("Bob", 2, 10, Decimal("15.5"))
