# employee_payroll/presentation/__init__.py
