"""
Load sample departments and employees.

Run after `alembic upgrade head`:

    python -m scripts.seed_demo

Records that already exist (same department name / same email) are left alone,
so the script can be re-run safely.
"""
from datetime import date
from decimal import Decimal

from employee_management.core.config import settings
from employee_management.core.logging_config import setup_logging
from employee_management.db.session import SessionLocal
from employee_management.core.errors import NotFoundError
from employee_management.schemas.department import DepartmentIn
from employee_management.schemas.employee import EmployeeCreate, EmploymentStatus
from employee_management.services import department_service, employee_service

DEPARTMENTS = [
    ("Information Technology", "Handles all IT operations and software development"),
    ("Human Resources", "Manages employee relations and recruitment"),
    ("Finance", "Manages company finances and accounting"),
    ("Marketing", "Handles marketing campaigns and customer relations"),
]

# first, last, email, phone, hire date, salary, department, status
EMPLOYEES = [
    ("John", "Doe", "john.doe@company.com", "+1234567890", date(2022, 1, 15), "75000.00", "Information Technology", "ACTIVE"),
    ("Jane", "Smith", "jane.smith@company.com", "+1234567891", date(2021, 3, 20), "85000.00", "Information Technology", "ACTIVE"),
    ("Mike", "Johnson", "mike.johnson@company.com", "+1234567892", date(2020, 6, 10), "95000.00", "Information Technology", "ACTIVE"),
    ("Sarah", "Wilson", "sarah.wilson@company.com", "+1234567893", date(2019, 8, 25), "65000.00", "Human Resources", "ACTIVE"),
    ("David", "Brown", "david.brown@company.com", "+1234567894", date(2021, 11, 5), "60000.00", "Human Resources", "ACTIVE"),
    ("Lisa", "Garcia", "lisa.garcia@company.com", "+1234567895", date(2020, 2, 14), "70000.00", "Finance", "ACTIVE"),
    ("Robert", "Miller", "robert.miller@company.com", "+1234567896", date(2018, 9, 30), "80000.00", "Finance", "ACTIVE"),
    ("Emily", "Davis", "emily.davis@company.com", "+1234567897", date(2022, 4, 12), "55000.00", "Marketing", "ACTIVE"),
    ("James", "Anderson", "james.anderson@company.com", "+1234567898", date(2021, 7, 8), "62000.00", "Marketing", "ACTIVE"),
    ("Alex", "Taylor", "alex.taylor@company.com", "+1234567899", date(2019, 12, 1), "58000.00", "Marketing", "TERMINATED"),
]


def upsert_department(db, name: str, description: str):
    try:
        return department_service.get_department_by_name(db, name)
    except NotFoundError:
        return department_service.create_department(
            db, DepartmentIn(department_name=name, description=description)
        )


def upsert_employee(db, first, last, email, phone, hire_date, salary, department, status):
    if employee_service.email_exists(db, email):
        return employee_service.get_employee_by_email(db, email)

    return employee_service.create_employee(
        db,
        EmployeeCreate(
            first_name=first,
            last_name=last,
            email=email,
            phone_number=phone,
            hire_date=hire_date,
            salary=Decimal(salary),
            department_id=department.id,
            employment_status=EmploymentStatus(status),
        ),
    )


def main():
    setup_logging(settings.LOG_LEVEL)
    db = SessionLocal()
    try:
        departments = {name: upsert_department(db, name, desc) for name, desc in DEPARTMENTS}

        print("Seeded employees:")
        for first, last, email, phone, hired, salary, dept_name, status in EMPLOYEES:
            e = upsert_employee(db, first, last, email, phone, hired, salary, departments[dept_name], status)
            print(e.email, e.full_name, e.id, dept_name, e.employment_status)
    finally:
        db.close()

if __name__ == "__main__":
    main()
