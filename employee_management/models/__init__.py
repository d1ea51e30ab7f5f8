from employee_management.models.department import Department
from employee_management.models.employee import Employee

__all__ = ["Department", "Employee"]
