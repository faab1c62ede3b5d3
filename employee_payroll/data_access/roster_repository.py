# employee_payroll/data_access/roster_repository.py

from typing import List, Optional

from employee_payroll.business_logic.entities.employee_entity import EmployeeEntity
import logging

logger = logging.getLogger(__name__)

class RosterRepository:
    """
    In-memory, insertion-ordered store of employee records.

    The repository trusts its caller: ``add`` does not check ID uniqueness,
    callers must check ``exists`` first.
    """

    def __init__(self, employees: Optional[List[EmployeeEntity]] = None):
        self._employees: List[EmployeeEntity] = list(employees) if employees else []
        logger.debug(f"RosterRepository initialized with {len(self._employees)} employees.")

    def add(self, employee: EmployeeEntity) -> EmployeeEntity:
        self._employees.append(employee)
        logger.debug(f"RosterRepository.add: {type(employee).__name__} ID {employee.id}. Roster size: {len(self._employees)}")
        return employee

    def remove(self, employee_id: int) -> int:
        """Removes every record with this ID. Returns how many were removed (0 is not an error)."""
        before = len(self._employees)
        self._employees = [e for e in self._employees if e.id != employee_id]
        removed = before - len(self._employees)
        logger.debug(f"RosterRepository.remove: ID {employee_id}, {removed} record(s) removed.")
        return removed

    def exists(self, employee_id: int) -> bool:
        return any(e.id == employee_id for e in self._employees)

    def get_by_id(self, employee_id: int) -> Optional[EmployeeEntity]:
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        return None

    def get_all(self) -> List[EmployeeEntity]:
        # A copy: callers can't mutate the roster through it
        return list(self._employees)

    def count(self) -> int:
        return len(self._employees)

    def __len__(self) -> int:
        return self.count()
