"""Error Handlers — render every failure as the UserCrudError envelope.

Invariants:
    - UserCrudError → its own http_status and to_response() body
    - RequestValidationError (JSON shape, path types) → UserValidationError, 400, one
      FieldError per Pydantic error
    - Exception (catch-all) → InternalError, 500, never leaks internal details

Design Decisions:
    - Handlers translate into core/errors.py types and share one renderer, so clients
      see a single envelope shape whatever layer failed
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from usercrud.core.domain_types import FieldError
from usercrud.core.errors import UserCrudError, UserValidationError, InternalError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(UserCrudError, handle_user_crud_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def render_error(exc: UserCrudError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_user_crud_error(request: Request, exc: UserCrudError):
    """Domain and infrastructure errors raised by services and repositories."""
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return render_error(exc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
):
    """Malformed bodies and path parameters, rejected before any service runs."""
    error = UserValidationError(
        request_field_errors(exc), message="Invalid request data",
    )
    logger.warning(
        f"Validation error on {request.url.path}: {error.details()}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return render_error(error)


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return render_error(InternalError())


def request_field_errors(exc: RequestValidationError) -> list[FieldError]:
    """One FieldError per Pydantic error, field as a dotted location (body.email)."""
    return [
        FieldError(
            field=".".join(str(loc) for loc in e["loc"]),
            message=e["msg"],
            type=e["type"],
        )
        for e in exc.errors()
    ]
