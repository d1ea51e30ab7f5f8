import uuid

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from employee_management.db.session import get_db
from employee_management.models.department import Department
from employee_management.schemas.department import (
    DepartmentIn,
    DepartmentOut,
    DepartmentWithEmployeesOut,
)
from employee_management.services import department_service, employee_service
from employee_management.api.employees import employee_to_out

router = APIRouter(prefix="/api/departments", tags=["departments"])


def department_to_out(d: Department, employee_count: int) -> DepartmentOut:
    return DepartmentOut(
        id=str(d.id),
        department_name=d.department_name,
        description=d.description,
        employee_count=employee_count,
        created_at=d.created_at,
        updated_at=d.updated_at,
    )


def departments_to_out(db: Session, departments: list[Department]) -> list[DepartmentOut]:
    counts = employee_service.headcounts(db, [d.id for d in departments])
    return [department_to_out(d, counts[d.id]) for d in departments]


def single_department_out(db: Session, d: Department) -> DepartmentOut:
    return department_to_out(d, employee_service.count_by_department(db, d.id))


@router.get("", response_model=list[DepartmentOut])
def list_departments(db: Session = Depends(get_db)):
    return departments_to_out(db, department_service.list_departments(db))


@router.get("/with-employees", response_model=list[DepartmentWithEmployeesOut])
def list_departments_with_employees(db: Session = Depends(get_db)):
    """
    List every department with its employees embedded.
    """
    return [
        DepartmentWithEmployeesOut(
            id=str(d.id),
            department_name=d.department_name,
            description=d.description,
            employee_count=len(d.employees),
            created_at=d.created_at,
            updated_at=d.updated_at,
            employees=[employee_to_out(e) for e in d.employees],
        )
        for d in department_service.list_departments_with_employees(db)
    ]


@router.get("/search", response_model=list[DepartmentOut])
def search_departments(
    name: str = Query(..., min_length=1, description="Case-insensitive substring of the department name"),
    db: Session = Depends(get_db),
):
    return departments_to_out(db, department_service.search_departments(db, name))


@router.get("/name/{name}", response_model=DepartmentOut)
def get_department_by_name(name: str, db: Session = Depends(get_db)):
    return single_department_out(db, department_service.get_department_by_name(db, name))


@router.get("/{department_id}", response_model=DepartmentOut)
def get_department(department_id: uuid.UUID, db: Session = Depends(get_db)):
    return single_department_out(db, department_service.get_department(db, department_id))


@router.post("", response_model=DepartmentOut, status_code=status.HTTP_201_CREATED)
def create_department(payload: DepartmentIn, db: Session = Depends(get_db)):
    d = department_service.create_department(db, payload)
    return department_to_out(d, 0)


@router.put("/{department_id}", response_model=DepartmentOut)
def update_department(
    department_id: uuid.UUID,
    payload: DepartmentIn,
    db: Session = Depends(get_db),
):
    d = department_service.update_department(db, department_id, payload)
    return single_department_out(db, d)


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_department(department_id: uuid.UUID, db: Session = Depends(get_db)):
    department_service.delete_department(db, department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
