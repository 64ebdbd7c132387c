"""Error taxonomy shared by the services and the HTTP layer.

Services raise these; ``install_exception_handlers`` maps them onto the
``{"success": false, ...}`` response envelope.
"""

import logging
from typing import Iterable, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "query", "path", "header", "form")


class AppError(Exception):
    """Base error with an HTTP-equivalent status code and a user-safe message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message}


class ValidationError(AppError):
    """Raised with every field violation found, not just the first one."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[dict], message: str = "Validation failed") -> None:
        super().__init__(message)
        self.errors = errors

    @classmethod
    def from_pydantic(cls, raw_errors: Iterable[dict]) -> "ValidationError":
        errors = []
        for err in raw_errors:
            loc = [str(part) for part in err.get("loc", ())]
            if loc and loc[0] in _LOCATION_PREFIXES:
                loc = loc[1:]
            errors.append({"field": ".".join(loc), "message": err.get("msg", "Invalid value")})
        return cls(errors)

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message, "errors": self.errors}


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Not authorized to access this route") -> None:
        super().__init__(message)


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(AppError):
    """Business-rule or uniqueness violation (duplicate name, taken date, capacity)."""

    status_code = status.HTTP_400_BAD_REQUEST


# ---------------------------------------------------------------------------
# FastAPI wiring
# ---------------------------------------------------------------------------


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers: Optional[dict] = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError.from_pydantic(exc.errors())
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Server Error"},
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
