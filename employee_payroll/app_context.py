# employee_payroll/app_context.py

from dataclasses import dataclass

from employee_payroll.business_logic.employee_manager import EmployeeManager
from employee_payroll.data_access.roster_repository import RosterRepository
import logging

logger = logging.getLogger(__name__)

@dataclass
class ApplicationContext:
    """Everything one running application owns: the roster and the manager over it."""
    roster_repository: RosterRepository
    employee_manager: EmployeeManager

    def close(self):
        logger.info(f"Closing application context. {self.roster_repository.count()} employees discarded.")


def create_application_context() -> ApplicationContext:
    logger.info("Initializing roster repository and employee manager...")
    roster_repository = RosterRepository()
    return ApplicationContext(roster_repository=roster_repository,
                              employee_manager=EmployeeManager(roster_repository))
