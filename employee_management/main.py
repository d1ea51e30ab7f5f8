from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_management.api.health import router as health_router
from employee_management.api.root import router as root_router
from employee_management.api.departments import router as departments_router
from employee_management.api.employees import router as employees_router
from employee_management.core.config import settings
from employee_management.core.errors import DomainError, domain_error_handler
from employee_management.core.logging_config import setup_logging

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title="Employee Management Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(DomainError, domain_error_handler)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(departments_router)
app.include_router(employees_router)
