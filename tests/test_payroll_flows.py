"""
Tests for the add, remove and display flows, driven through a scripted UI.
"""
from decimal import Decimal
from unittest.mock import patch

import pytest

from employee_payroll.business_logic.errors import (
    FormatError, ValidationError, DuplicateIdError, NotFoundError)
from employee_payroll.presentation.payroll_flows import PayrollFlows, FlowStatus

FULL_TIME = 0
PART_TIME = 1


@pytest.fixture
def flows(context, ui):
    return PayrollFlows(context, ui)


def _roster(context):
    return [e.id for e in context.roster_repository.get_all()]


class TestAddFlow:
    """Add flow: type, name, ID, duplicate check, type fields, add, re-render."""

    def test_add_full_time(self, flows, context, ui):
        ui.queue(FULL_TIME, "Alice", "1", "3000.00")

        outcome = flows.add_employee()

        assert outcome.completed
        assert ui.screen == "Employee [Name: Alice, ID: 1, Salary: 3000.00]"
        assert ui.messages == []
        assert ui.prompts == ["Select Employee Type", "Enter Name:", "Enter ID:", "Enter Monthly Salary:"]

    def test_add_part_time(self, flows, context, ui):
        ui.queue(PART_TIME, "Bob", "2", "10", "15.5")

        outcome = flows.add_employee()

        assert outcome.completed
        assert outcome.employee.compute_salary() == 155.0
        assert ui.prompts[-2:] == ["Enter Hours Worked:", "Enter Hourly Rate:"]
        assert ui.screen == "Employee [Name: Bob, ID: 2, Salary: 155.00]"

    def test_name_is_trimmed(self, flows, context, ui):
        ui.queue(FULL_TIME, "  Alice  ", "1", "1")

        assert flows.add_employee().employee.name == "Alice"

    def test_blank_name_rejected(self, flows, context, ui):
        ui.queue(FULL_TIME, "   ")

        outcome = flows.add_employee()

        assert outcome.status is FlowStatus.REJECTED
        assert isinstance(outcome.error, ValidationError)
        assert ui.messages == ["Name cannot be empty"]
        assert _roster(context) == []

    def test_non_integer_id_rejected(self, flows, context, ui):
        ui.queue(FULL_TIME, "Alice", "one")

        outcome = flows.add_employee()

        assert isinstance(outcome.error, FormatError)
        assert ui.messages == ["Please enter valid numeric input."]
        assert _roster(context) == []

    def test_duplicate_id_rejected_before_store(self, flows, context, ui):
        ui.queue(FULL_TIME, "Alice", "1", "3000")
        flows.add_employee()
        ui.queue(PART_TIME, "Other", "1")

        with patch.object(context.roster_repository, "add", wraps=context.roster_repository.add) as add:
            outcome = flows.add_employee()

        add.assert_not_called()
        assert isinstance(outcome.error, DuplicateIdError)
        assert ui.messages == ["Employee with this ID already exists."]
        # the type-specific fields were never asked for
        assert ui.prompts[-1] == "Enter ID:"
        assert _roster(context) == [1]

    def test_non_numeric_salary_rejected(self, flows, context, ui):
        ui.queue(FULL_TIME, "Alice", "1", "lots")

        outcome = flows.add_employee()

        assert isinstance(outcome.error, FormatError)
        assert _roster(context) == []

    def test_negative_salary_rejected(self, flows, context, ui):
        ui.queue(FULL_TIME, "Alice", "1", "-100")

        outcome = flows.add_employee()

        assert isinstance(outcome.error, ValidationError)
        assert ui.messages == ["Salary cannot be negative"]
        assert _roster(context) == []

    @pytest.mark.parametrize("hours,rate", [("-1", "10"), ("10", "-0.5")])
    def test_negative_part_time_values_rejected(self, flows, context, ui, hours, rate):
        ui.queue(PART_TIME, "Bob", "2", hours, rate)

        outcome = flows.add_employee()

        assert isinstance(outcome.error, ValidationError)
        assert ui.messages == ["Values must be positive"]
        assert _roster(context) == []

    @pytest.mark.parametrize("hours,rate", [("ten", "10"), ("10", "x"), ("1.5", "10")])
    def test_non_numeric_part_time_values_rejected(self, flows, context, ui, hours, rate):
        ui.queue(PART_TIME, "Bob", "2", hours, rate)

        outcome = flows.add_employee()

        assert isinstance(outcome.error, FormatError)
        assert _roster(context) == []

    @pytest.mark.parametrize("answers", [
        [None],
        [FULL_TIME, None],
        [FULL_TIME, "Alice", None],
        [FULL_TIME, "Alice", "1", None],
        [PART_TIME, "Bob", "2", None],
        [PART_TIME, "Bob", "2", "10", None],
    ])
    def test_cancel_at_any_prompt_adds_nothing(self, flows, context, ui, answers):
        ui.queue(*answers)

        outcome = flows.add_employee()

        assert outcome.status is FlowStatus.CANCELLED
        assert ui.messages == []
        assert ui.rendered == []
        assert _roster(context) == []

    def test_unexpected_error_is_reported(self, flows, context, ui):
        ui.queue(FULL_TIME, "Alice", "1", "1")

        with patch.object(context.employee_manager, "add_employee", side_effect=RuntimeError("boom")):
            outcome = flows.add_employee()

        assert outcome.status is FlowStatus.FAILED
        assert ui.messages == ["Error: boom"]

    def test_insertion_order_across_flows(self, flows, context, ui):
        ui.queue(FULL_TIME, "A", "3", "1", PART_TIME, "B", "1", "1", "1", FULL_TIME, "C", "2", "1")
        for _ in range(3):
            flows.add_employee()

        assert _roster(context) == [3, 1, 2]

    def test_huge_salary_is_added_and_rendered(self, flows, context, ui):
        ui.queue(FULL_TIME, "Alice", "1", "1e30")

        outcome = flows.add_employee()

        assert outcome.completed
        assert ui.messages == []
        assert ui.screen == "Employee [Name: Alice, ID: 1, Salary: 1000000000000000000000000000000.00]"
        assert flows.display_employees().completed

    def test_part_time_pay_longer_than_28_digits(self, flows, context, ui):
        ui.queue(PART_TIME, "Bob", "2", "1000000000", "123456789012345678901234567.89")

        outcome = flows.add_employee()

        assert outcome.completed
        assert ui.screen.endswith("Salary: 123456789012345678901234567890000000.00]")

    def test_out_of_range_id_rejected(self, flows, context, ui):
        ui.queue(FULL_TIME, "Alice", "2147483648")

        outcome = flows.add_employee()

        assert isinstance(outcome.error, FormatError)
        assert ui.messages == ["Please enter valid numeric input."]
        assert _roster(context) == []


class TestRemoveFlow:

    def test_remove_existing(self, flows, context, ui, alice, bob):
        context.employee_manager.add_employee(alice)
        context.employee_manager.add_employee(bob)
        ui.queue("1")

        outcome = flows.remove_employee()

        assert outcome.completed
        assert _roster(context) == [2]
        assert ui.screen == "Employee [Name: Bob, ID: 2, Salary: 155.00]"

    def test_remove_from_empty_roster(self, flows, context, ui):
        ui.queue("99")

        outcome = flows.remove_employee()

        assert isinstance(outcome.error, NotFoundError)
        assert ui.messages == ["Employee ID not found."]
        assert _roster(context) == []
        assert ui.rendered == []

    def test_non_numeric_id(self, flows, context, ui, alice):
        context.employee_manager.add_employee(alice)
        ui.queue("abc")

        outcome = flows.remove_employee()

        assert isinstance(outcome.error, FormatError)
        assert ui.messages == ["Please enter a valid numeric ID."]
        assert _roster(context) == [1]

    def test_overlong_id_is_a_format_error(self, flows, context, ui, alice):
        context.employee_manager.add_employee(alice)
        ui.queue("9" * 5000)

        outcome = flows.remove_employee()

        assert outcome.status is FlowStatus.REJECTED
        assert isinstance(outcome.error, FormatError)
        assert ui.messages == ["Please enter a valid numeric ID."]
        assert _roster(context) == [1]

    def test_cancel(self, flows, context, ui, alice):
        context.employee_manager.add_employee(alice)
        ui.queue(None)

        assert flows.remove_employee().status is FlowStatus.CANCELLED
        assert _roster(context) == [1]


class TestDisplayFlow:

    def test_display_replaces_text(self, flows, context, ui, alice, bob):
        flows.display_employees()
        context.employee_manager.add_employee(alice)
        context.employee_manager.add_employee(bob)
        flows.display_employees()

        assert ui.rendered == [
            "",
            "Employee [Name: Alice, ID: 1, Salary: 3000.00]\nEmployee [Name: Bob, ID: 2, Salary: 155.00]",
        ]

    def test_render_failure_is_reported_not_raised(self, flows, context, ui):
        with patch.object(context.employee_manager, "render_roster", side_effect=RuntimeError("boom")):
            outcome = flows.display_employees()

        assert outcome.status is FlowStatus.FAILED
        assert ui.messages == ["Error: boom"]
        assert ui.rendered == []

    def test_requires_context_and_ui(self, context, ui):
        with pytest.raises(ValueError):
            PayrollFlows(None, ui)
        with pytest.raises(ValueError):
            PayrollFlows(context, None)
