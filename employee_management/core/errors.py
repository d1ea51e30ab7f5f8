from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse


class DomainError(Exception):
    """
    Base class for business-rule failures raised by the service layer.

    Each subclass carries the HTTP status the API layer answers with, so
    routes never translate errors by hand.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND


class DuplicateNameError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateEmailError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST


class HasDependentsError(DomainError):
    status_code = status.HTTP_409_CONFLICT


class InvalidSalaryError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST


class StoreConflictError(DomainError):
    """The database refused a write (unique or foreign key constraint)."""

    status_code = status.HTTP_409_CONFLICT


def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    # Same body shape as fastapi.HTTPException
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
