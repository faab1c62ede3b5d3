# employee_payroll/__init__.py
