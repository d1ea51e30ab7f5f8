import uuid
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

PHONE_PATTERN = r"^\+?[0-9]{10,15}$"


class EmploymentStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    TERMINATED = "TERMINATED"


class EmployeeBase(BaseModel):
    first_name: str = Field(min_length=2, max_length=50)
    last_name: str = Field(min_length=2, max_length=50)
    email: EmailStr
    phone_number: str | None = Field(default=None, pattern=PHONE_PATTERN)
    salary: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    department_id: uuid.UUID | None = None
    employment_status: EmploymentStatus = EmploymentStatus.ACTIVE

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class EmployeeCreate(EmployeeBase):
    hire_date: date

    @field_validator("hire_date")
    @classmethod
    def hire_date_not_in_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("hire_date must not be in the future")
        return v


class EmployeeUpdate(EmployeeBase):
    """Full replacement of the mutable fields; hire_date is fixed at creation."""


class EmployeeOut(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str | None
    hire_date: date
    salary: Decimal
    employment_status: str
    department_id: str | None
    department_name: str | None
    created_at: datetime
    updated_at: datetime


class DepartmentHeadcountOut(BaseModel):
    department_id: str
    employee_count: int


class DepartmentAverageSalaryOut(BaseModel):
    department_id: str
    average_salary: Decimal | None  # null when the department has no employees


def normalize_email(value: str) -> str | None:
    """
    The form ``EmailStr`` stores (domain lowercased), or None if ``value``
    is not an address at all. Lookups go through this so they compare the
    same string the write path saved.
    """
    try:
        return validate_email(value)[1]
    except PydanticCustomError:
        return None
