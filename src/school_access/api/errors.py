"""
school_access.api.errors

Error-to-response mapping for the HTTP surface.

Responsibilities:
- Translate domain errors into status codes and `{"detail": ...}` bodies.
- Report malformed request bodies as 400 instead of FastAPI's default 422.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from school_access.errors import (
    AccessError,
    NotFound,
    PermissionDenied,
    Unauthenticated,
    ValidationError,
)
from school_access.settings import Settings

# Most specific first; the first isinstance match wins.
ERROR_STATUS: tuple[tuple[type[AccessError], int], ...] = (
    (Unauthenticated, HTTP_401_UNAUTHORIZED),
    (ValidationError, HTTP_400_BAD_REQUEST),
    (NotFound, HTTP_404_NOT_FOUND),
)


def status_for(exc: AccessError, settings: Settings) -> int:
    if isinstance(exc, PermissionDenied):
        return settings.deny_status_code
    for error_type, status in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status
    return HTTP_500_INTERNAL_SERVER_ERROR


def install_error_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(AccessError)
    async def _access_error(_: Request, exc: AccessError) -> JSONResponse:
        headers = {"WWW-Authenticate": "Basic"} if isinstance(exc, Unauthenticated) else None
        return JSONResponse(
            status_code=status_for(exc, settings),
            content={"detail": exc.detail},
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def _bad_body(_: Request, exc: RequestValidationError) -> JSONResponse:
        fields = sorted({".".join(str(p) for p in err["loc"][1:]) for err in exc.errors()})
        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content={"detail": f"Invalid request body: {', '.join(fields) or 'body'}"},
        )
