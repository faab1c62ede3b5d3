# employee_payroll/business_logic/employee_manager.py

from typing import List

from employee_payroll.business_logic.entities.employee_entity import EmployeeEntity
from employee_payroll.business_logic.errors import DuplicateIdError, NotFoundError
from employee_payroll.business_logic.result import Ok, Err, Result
from employee_payroll.data_access.roster_repository import RosterRepository
from employee_payroll.constants import MSG_DUPLICATE_ID, MSG_ID_NOT_FOUND
import logging

logger = logging.getLogger(__name__)

class EmployeeManager:
    def __init__(self, roster_repository: RosterRepository):
        """
        Initializes the EmployeeManager.
        :param roster_repository: An instance of RosterRepository.
        """
        if roster_repository is None: raise ValueError("roster_repository cannot be None")
        self.roster_repository = roster_repository

    def employee_exists(self, employee_id: int) -> bool:
        return self.roster_repository.exists(employee_id)

    def ensure_id_available(self, employee_id: int) -> Result[int]:
        """Err(DuplicateIdError) if an employee with this ID is already on the roster."""
        if self.roster_repository.exists(employee_id):
            logger.warning(f"Employee ID {employee_id} is already taken.")
            return Err(DuplicateIdError(MSG_DUPLICATE_ID, employee_id))
        return Ok(employee_id)

    def add_employee(self, employee: EmployeeEntity) -> EmployeeEntity:
        """
        Appends an already validated employee to the roster.
        ID uniqueness must have been checked with ensure_id_available beforehand.
        """
        self.roster_repository.add(employee)
        logger.info(f"{employee.employee_type.value} employee '{employee.name}' added with ID {employee.id}.")
        return employee

    def remove_employee(self, employee_id: int) -> Result[int]:
        """Removes the employee with this ID, or returns Err(NotFoundError) if there is none."""
        employee = self.roster_repository.get_by_id(employee_id)
        if employee is None:
            logger.warning(f"Employee ID {employee_id} not found for removal.")
            return Err(NotFoundError(MSG_ID_NOT_FOUND, employee_id))
        self.roster_repository.remove(employee_id)
        logger.info(f"Employee '{employee.name}' (ID: {employee_id}) removed.")
        return Ok(employee_id)

    def get_all_employees(self) -> List[EmployeeEntity]:
        return self.roster_repository.get_all()

    def render_roster(self) -> str:
        """One describe() line per employee, in insertion order."""
        return "\n".join(e.describe() for e in self.get_all_employees())
