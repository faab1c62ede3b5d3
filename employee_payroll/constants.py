# employee_payroll/constants.py

from enum import Enum

class EmployeeType(Enum):
    FULL_TIME = "Full-Time"
    PART_TIME = "Part-Time"

# Order matters: it's the order of the options in the "Employee Type" prompt
EMPLOYEE_TYPE_CHOICES = [EmployeeType.FULL_TIME, EmployeeType.PART_TIME]

DESCRIBE_FORMAT = "Employee [Name: {name}, ID: {id}, Salary: {salary}]"

# --- Prompt titles ---
PROMPT_EMPLOYEE_TYPE = "Select Employee Type"
PROMPT_NAME = "Enter Name:"
PROMPT_ID = "Enter ID:"
PROMPT_MONTHLY_SALARY = "Enter Monthly Salary:"
PROMPT_HOURS_WORKED = "Enter Hours Worked:"
PROMPT_HOURLY_RATE = "Enter Hourly Rate:"
PROMPT_REMOVE_ID = "Enter Employee ID to Remove:"

# --- User messages ---
MSG_NAME_EMPTY = "Name cannot be empty"
MSG_INVALID_NUMBER = "Please enter valid numeric input."
MSG_INVALID_ID = "Please enter a valid numeric ID."
MSG_DUPLICATE_ID = "Employee with this ID already exists."
MSG_ID_NOT_FOUND = "Employee ID not found."
MSG_NEGATIVE_SALARY = "Salary cannot be negative"
MSG_NEGATIVE_VALUES = "Values must be positive"
MSG_UNEXPECTED_ERROR = "Error: {error}"
