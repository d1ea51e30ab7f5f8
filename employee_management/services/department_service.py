"""
Department service: CRUD, name lookups and the delete guard.

Every function takes the request's SQLAlchemy session. Mutating calls
commit once, after every business rule has passed.
"""

import logging
import uuid

from sqlalchemy.orm import Session, selectinload

from employee_management.core.errors import DuplicateNameError, HasDependentsError, NotFoundError
from employee_management.models.department import Department
from employee_management.schemas.department import DepartmentIn
from employee_management.services.store import LIKE_ESCAPE, commit_or_conflict, contains_pattern
from employee_management.services import employee_service

logger = logging.getLogger(__name__)


def list_departments(db: Session) -> list[Department]:
    return db.query(Department).order_by(Department.created_at.asc()).all()


def list_departments_with_employees(db: Session) -> list[Department]:
    """
    Same rows as ``list_departments`` with ``employees`` loaded up front.

    Departments without employees are included with an empty collection.
    """
    return (
        db.query(Department)
        .options(selectinload(Department.employees))
        .populate_existing()
        .order_by(Department.created_at.asc())
        .all()
    )


def get_department(db: Session, department_id: uuid.UUID) -> Department:
    department = db.get(Department, department_id)
    if not department:
        raise NotFoundError(f"Department not found with id: {department_id}")
    return department


def get_department_by_name(db: Session, name: str) -> Department:
    department = db.query(Department).filter(Department.department_name == name).one_or_none()
    if not department:
        raise NotFoundError(f"Department not found with name: {name}")
    return department


def department_name_exists(db: Session, name: str) -> bool:
    # Exact, case-sensitive comparison; search_departments is the fuzzy one.
    return db.query(
        db.query(Department).filter(Department.department_name == name).exists()
    ).scalar()


def create_department(db: Session, payload: DepartmentIn) -> Department:
    if department_name_exists(db, payload.department_name):
        logger.warning("Rejected duplicate department name %r", payload.department_name)
        raise DuplicateNameError(f"Department with name {payload.department_name} already exists")

    department = Department(
        department_name=payload.department_name,
        description=payload.description,
    )
    db.add(department)
    commit_or_conflict(db)
    db.refresh(department)

    logger.info("Created department %s (%s)", department.id, department.department_name)
    return department


def update_department(db: Session, department_id: uuid.UUID, payload: DepartmentIn) -> Department:
    """
    Overwrite name and description.

    Name uniqueness is only checked on create; a clash here is left to the
    table's unique constraint.
    """
    department = get_department(db, department_id)

    department.department_name = payload.department_name
    department.description = payload.description

    commit_or_conflict(db)
    db.refresh(department)

    logger.info("Updated department %s", department.id)
    return department


def delete_department(db: Session, department_id: uuid.UUID) -> None:
    department = get_department(db, department_id)

    dependents = employee_service.count_by_department(db, department.id)
    if dependents:
        logger.warning(
            "Refused to delete department %s with %d employee(s)", department.id, dependents
        )
        raise HasDependentsError("Cannot delete department with existing employees")

    db.delete(department)
    commit_or_conflict(db)

    logger.info("Deleted department %s", department_id)


def search_departments(db: Session, name: str) -> list[Department]:
    search_term = contains_pattern(name)
    return (
        db.query(Department)
        .filter(Department.department_name.ilike(search_term, escape=LIKE_ESCAPE))
        .order_by(Department.department_name.asc())
        .all()
    )
