"""
Employee service: CRUD, filtered reads, per-department aggregates and the
promote/terminate transitions.

Field constraints are already enforced by the pydantic schemas by the time
a payload gets here; this module only owns the rules that need the store
(email uniqueness, department existence, salary must go up).
"""

import logging
import uuid
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from employee_management.core.errors import DuplicateEmailError, InvalidSalaryError, NotFoundError
from employee_management.models.department import Department
from employee_management.models.employee import Employee
from employee_management.schemas.employee import EmployeeCreate, EmployeeUpdate, EmploymentStatus, normalize_email
from employee_management.services.store import LIKE_ESCAPE, commit_or_conflict, contains_pattern

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


# -- Lookups ---------------------------------------------------------------


def list_employees(db: Session) -> list[Employee]:
    return db.query(Employee).order_by(Employee.created_at.asc()).all()


def get_employee(db: Session, employee_id: uuid.UUID) -> Employee:
    employee = db.get(Employee, employee_id)
    if not employee:
        raise NotFoundError(f"Employee not found with id: {employee_id}")
    return employee


def get_employee_by_email(db: Session, email: str) -> Employee:
    normalized = normalize_email(email)
    employee = None
    if normalized is not None:
        employee = db.query(Employee).filter(Employee.email == normalized).one_or_none()
    if not employee:
        raise NotFoundError(f"Employee not found with email: {email}")
    return employee


def email_exists(db: Session, email: str) -> bool:
    normalized = normalize_email(email)
    if normalized is None:
        return False
    return db.query(db.query(Employee).filter(Employee.email == normalized).exists()).scalar()


def _ensure_department(db: Session, department_id: uuid.UUID | None) -> None:
    if department_id is not None and db.get(Department, department_id) is None:
        raise NotFoundError(f"Department not found with id: {department_id}")


# -- Mutations -------------------------------------------------------------


def create_employee(db: Session, payload: EmployeeCreate) -> Employee:
    if email_exists(db, payload.email):
        logger.warning("Rejected duplicate employee email %s", payload.email)
        raise DuplicateEmailError(f"Employee with email {payload.email} already exists")
    _ensure_department(db, payload.department_id)

    employee = Employee(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        phone_number=payload.phone_number,
        hire_date=payload.hire_date,
        salary=payload.salary,
        department_id=payload.department_id,
        employment_status=(payload.employment_status or EmploymentStatus.ACTIVE).value,
    )
    db.add(employee)
    commit_or_conflict(db)
    db.refresh(employee)

    logger.info("Created employee %s (%s)", employee.id, employee.email)
    return employee


def update_employee(db: Session, employee_id: uuid.UUID, payload: EmployeeUpdate) -> Employee:
    """
    Overwrite every mutable field with the payload.

    Email uniqueness is enforced on create only; a clash on update is left
    to the table's unique constraint. ``hire_date`` never changes.
    """
    employee = get_employee(db, employee_id)
    _ensure_department(db, payload.department_id)

    employee.first_name = payload.first_name
    employee.last_name = payload.last_name
    employee.email = payload.email
    employee.phone_number = payload.phone_number
    employee.salary = payload.salary
    employee.department_id = payload.department_id
    employee.employment_status = payload.employment_status.value

    commit_or_conflict(db)
    db.refresh(employee)

    logger.info("Updated employee %s", employee.id)
    return employee


def delete_employee(db: Session, employee_id: uuid.UUID) -> None:
    employee = get_employee(db, employee_id)
    db.delete(employee)
    commit_or_conflict(db)

    logger.info("Deleted employee %s", employee_id)


def promote_employee(db: Session, employee_id: uuid.UUID, new_salary: Decimal) -> Employee:
    employee = get_employee(db, employee_id)

    if new_salary <= employee.salary:
        logger.warning(
            "Rejected promotion of %s: %s is not above %s", employee.id, new_salary, employee.salary
        )
        raise InvalidSalaryError("New salary must be higher than current salary")

    previous = employee.salary
    employee.salary = new_salary
    commit_or_conflict(db)
    db.refresh(employee)

    logger.info("Promoted employee %s: salary %s -> %s", employee.id, previous, employee.salary)
    return employee


def terminate_employee(db: Session, employee_id: uuid.UUID) -> Employee:
    # Idempotent: an already terminated employee is returned as is.
    employee = get_employee(db, employee_id)

    employee.employment_status = EmploymentStatus.TERMINATED.value
    commit_or_conflict(db)
    db.refresh(employee)

    logger.info("Terminated employee %s", employee.id)
    return employee


# -- Filtered reads --------------------------------------------------------


def search_employees(db: Session, name: str) -> list[Employee]:
    """Case-insensitive substring match on first or last name."""
    search_term = contains_pattern(name)
    return (
        db.query(Employee)
        .filter(
            or_(
                Employee.first_name.ilike(search_term, escape=LIKE_ESCAPE),
                Employee.last_name.ilike(search_term, escape=LIKE_ESCAPE),
            )
        )
        .order_by(Employee.last_name.asc(), Employee.first_name.asc())
        .all()
    )


def list_by_department(db: Session, department_id: uuid.UUID) -> list[Employee]:
    return (
        db.query(Employee)
        .filter(Employee.department_id == department_id)
        .order_by(Employee.last_name.asc(), Employee.first_name.asc())
        .all()
    )


def list_by_status(db: Session, status: EmploymentStatus) -> list[Employee]:
    return (
        db.query(Employee)
        .filter(Employee.employment_status == EmploymentStatus(status).value)
        .order_by(Employee.last_name.asc(), Employee.first_name.asc())
        .all()
    )


def list_by_hire_date_range(db: Session, start: date, end: date) -> list[Employee]:
    """Both ends inclusive. An inverted range matches nothing."""
    return (
        db.query(Employee)
        .filter(Employee.hire_date.between(start, end))
        .order_by(Employee.hire_date.asc())
        .all()
    )


def list_by_salary_range(db: Session, min_salary: Decimal, max_salary: Decimal) -> list[Employee]:
    """Both ends inclusive."""
    return (
        db.query(Employee)
        .filter(Employee.salary.between(min_salary, max_salary))
        .order_by(Employee.salary.asc())
        .all()
    )


# -- Aggregates ------------------------------------------------------------


def count_by_department(db: Session, department_id: uuid.UUID) -> int:
    count = (
        db.query(func.count(Employee.id))
        .filter(Employee.department_id == department_id)
        .scalar()
    )
    return int(count or 0)


def average_salary_by_department(db: Session, department_id: uuid.UUID) -> Decimal | None:
    """
    Mean salary of the department's employees, rounded to cents.

    Returns None when the department has no employees (or does not exist);
    callers render that as an explicit null rather than 0.
    """
    avg = (
        db.query(func.avg(Employee.salary))
        .filter(Employee.department_id == department_id)
        .scalar()
    )
    if avg is None:
        return None
    return Decimal(str(avg)).quantize(CENTS, rounding=ROUND_HALF_UP)


def headcounts(db: Session, department_ids: list[uuid.UUID]) -> dict[uuid.UUID, int]:
    """Employee count per department in one grouped query; absent ids count 0."""
    if not department_ids:
        return {}
    rows = (
        db.query(Employee.department_id, func.count(Employee.id))
        .filter(Employee.department_id.in_(department_ids))
        .group_by(Employee.department_id)
        .all()
    )
    counts = {department_id: 0 for department_id in department_ids}
    counts.update({department_id: int(n) for department_id, n in rows})
    return counts
