from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Employee Management Service",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "departments": "/api/departments",
        "employees": "/api/employees",
    }
