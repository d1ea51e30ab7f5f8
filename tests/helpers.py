from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from employee_management.models.department import Department
from employee_management.models.employee import Employee


def create_department(db: Session, name: str = "Engineering", description: str | None = None) -> Department:
    d = Department(department_name=name, description=description)
    db.add(d)
    db.commit()
    db.refresh(d)
    return d


def create_employee(
    db: Session,
    email: str,
    *,
    first_name: str = "Alice",
    last_name: str = "Smith",
    salary: str = "50000.00",
    hire_date: date = date(2022, 1, 15),
    department: Department | None = None,
    status: str = "ACTIVE",
    phone_number: str | None = None,
) -> Employee:
    e = Employee(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone_number=phone_number,
        hire_date=hire_date,
        salary=Decimal(salary),
        department_id=(department.id if department else None),
        employment_status=status,
    )
    db.add(e)
    db.commit()
    db.refresh(e)
    return e


def employee_payload(email: str, **overrides) -> dict:
    """JSON body for POST/PUT /api/employees."""
    body = {
        "first_name": "Alice",
        "last_name": "Smith",
        "email": email,
        "phone_number": "+1234567890",
        "hire_date": "2022-01-15",
        "salary": "50000.00",
        "department_id": None,
    }
    body.update(overrides)
    return body
