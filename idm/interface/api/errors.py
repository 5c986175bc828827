"""Mapping of domain errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from idm.domain.error import (
    DomainError,
    MissingParameterError,
    NotAuthorizedError,
    NotFoundError,
)

ERROR_STATUS_CODES: dict[type[DomainError], int] = {
    MissingParameterError: status.HTTP_400_BAD_REQUEST,
    NotAuthorizedError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain error as ``{"detail": message}``."""
    status_code = ERROR_STATUS_CODES.get(
        type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Register the handlers for the directory's domain errors.

    Other exceptions (repository failures included) are left to
    FastAPI's default 500 handling.
    """
    for error_type in ERROR_STATUS_CODES:
        app.add_exception_handler(error_type, domain_error_handler)
