import uuid
from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from employee_management.db.session import get_db
from employee_management.models.employee import Employee
from employee_management.schemas.employee import (
    DepartmentAverageSalaryOut,
    DepartmentHeadcountOut,
    EmployeeCreate,
    EmployeeOut,
    EmployeeUpdate,
    EmploymentStatus,
)
from employee_management.services import employee_service

router = APIRouter(prefix="/api/employees", tags=["employees"])


def employee_to_out(e: Employee) -> EmployeeOut:
    return EmployeeOut(
        id=str(e.id),
        first_name=e.first_name,
        last_name=e.last_name,
        email=e.email,
        phone_number=e.phone_number,
        hire_date=e.hire_date,
        salary=e.salary,
        employment_status=e.employment_status,
        department_id=str(e.department_id) if e.department_id else None,
        department_name=e.department.department_name if e.department else None,
        created_at=e.created_at,
        updated_at=e.updated_at,
    )


@router.get("", response_model=list[EmployeeOut])
def list_employees(db: Session = Depends(get_db)):
    return [employee_to_out(e) for e in employee_service.list_employees(db)]


@router.get("/search", response_model=list[EmployeeOut])
def search_employees(
    name: str = Query(..., min_length=1, description="Matches first or last name, case-insensitive"),
    db: Session = Depends(get_db),
):
    return [employee_to_out(e) for e in employee_service.search_employees(db, name)]


@router.get("/email/{email}", response_model=EmployeeOut)
def get_employee_by_email(email: str, db: Session = Depends(get_db)):
    return employee_to_out(employee_service.get_employee_by_email(db, email))


@router.get("/department/{department_id}", response_model=list[EmployeeOut])
def list_employees_by_department(department_id: uuid.UUID, db: Session = Depends(get_db)):
    return [employee_to_out(e) for e in employee_service.list_by_department(db, department_id)]


@router.get("/department/{department_id}/count", response_model=DepartmentHeadcountOut)
def count_employees_by_department(department_id: uuid.UUID, db: Session = Depends(get_db)):
    return DepartmentHeadcountOut(
        department_id=str(department_id),
        employee_count=employee_service.count_by_department(db, department_id),
    )


@router.get("/department/{department_id}/average-salary", response_model=DepartmentAverageSalaryOut)
def average_salary_by_department(department_id: uuid.UUID, db: Session = Depends(get_db)):
    """
    Mean salary for the department; ``average_salary`` is null when it has no employees.
    """
    return DepartmentAverageSalaryOut(
        department_id=str(department_id),
        average_salary=employee_service.average_salary_by_department(db, department_id),
    )


@router.get("/status/{employment_status}", response_model=list[EmployeeOut])
def list_employees_by_status(employment_status: EmploymentStatus, db: Session = Depends(get_db)):
    return [employee_to_out(e) for e in employee_service.list_by_status(db, employment_status)]


@router.get("/hired-between", response_model=list[EmployeeOut])
def list_employees_hired_between(
    start_date: date = Query(..., description="First hire date included (YYYY-MM-DD)"),
    end_date: date = Query(..., description="Last hire date included (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    return [
        employee_to_out(e)
        for e in employee_service.list_by_hire_date_range(db, start_date, end_date)
    ]


@router.get("/salary-range", response_model=list[EmployeeOut])
def list_employees_by_salary_range(
    min_salary: Decimal = Query(..., ge=0, description="Lowest salary included"),
    max_salary: Decimal = Query(..., ge=0, description="Highest salary included"),
    db: Session = Depends(get_db),
):
    return [
        employee_to_out(e)
        for e in employee_service.list_by_salary_range(db, min_salary, max_salary)
    ]


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: uuid.UUID, db: Session = Depends(get_db)):
    return employee_to_out(employee_service.get_employee(db, employee_id))


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(payload: EmployeeCreate, db: Session = Depends(get_db)):
    return employee_to_out(employee_service.create_employee(db, payload))


@router.put("/{employee_id}", response_model=EmployeeOut)
def update_employee(
    employee_id: uuid.UUID,
    payload: EmployeeUpdate,
    db: Session = Depends(get_db),
):
    return employee_to_out(employee_service.update_employee(db, employee_id, payload))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: uuid.UUID, db: Session = Depends(get_db)):
    employee_service.delete_employee(db, employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{employee_id}/promote", response_model=EmployeeOut)
def promote_employee(
    employee_id: uuid.UUID,
    new_salary: Decimal = Query(..., gt=0, max_digits=12, decimal_places=2),
    db: Session = Depends(get_db),
):
    return employee_to_out(employee_service.promote_employee(db, employee_id, new_salary))


@router.patch("/{employee_id}/terminate", response_model=EmployeeOut)
def terminate_employee(employee_id: uuid.UUID, db: Session = Depends(get_db)):
    return employee_to_out(employee_service.terminate_employee(db, employee_id))
