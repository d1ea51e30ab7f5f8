from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from employee_management.schemas.employee import EmployeeOut


class DepartmentIn(BaseModel):
    """Body for both create and full update."""
    department_name: str = Field(min_length=2, max_length=100)
    description: str | None = Field(default=None, max_length=500)

    @field_validator("department_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class DepartmentOut(BaseModel):
    id: str
    department_name: str
    description: str | None
    employee_count: int
    created_at: datetime
    updated_at: datetime


class DepartmentWithEmployeesOut(DepartmentOut):
    employees: list[EmployeeOut]
