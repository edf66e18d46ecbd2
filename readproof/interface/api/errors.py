"""Translation of domain errors into HTTP responses.

Every error body has the same shape:

    {"error": {"kind": ..., "code": ..., "message": ..., "violations": [...]}}
"""

from typing import Any, Iterable

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from readproof.domain.error import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    ErrorCode,
    InternalError,
    NotFoundError,
    ReplayError,
    ValidationError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ReplayError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_body(
    kind: str,
    code: str,
    message: str,
    violations: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return {
        "error": {
            "kind": kind,
            "code": code,
            "message": message,
            "violations": violations or [],
        }
    }


def violations_from(errors: Iterable[Any]) -> list[dict[str, Any]]:
    """Flatten pydantic error details into field/message pairs."""
    violations = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        violations.append(
            {
                "field": ".".join(location),
                "message": error.get("msg", "invalid value"),
            }
        )
    return violations


def status_for(error: DomainError) -> int:
    for error_type in type(error).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def domain_error_response(error: DomainError) -> JSONResponse:
    violations = error.violations if isinstance(error, ValidationError) else []
    return JSONResponse(
        status_code=status_for(error),
        content=error_body(error.kind, error.code.value, error.message, violations),
    )


def validation_response(errors: Iterable[Any]) -> JSONResponse:
    violations = violations_from(errors)
    return domain_error_response(
        ValidationError(
            f"Invalid request: {len(violations)} violation(s)",
            violations=violations,
        )
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers mapping every error family to one status code."""

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        if isinstance(exc, InternalError):
            logfire.error(
                "Internal error",
                path=request.url.path,
                error=exc.message,
            )
        return domain_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return validation_response(exc.errors())

    @app.exception_handler(pydantic.ValidationError)
    async def handle_pydantic_validation(
        request: Request, exc: pydantic.ValidationError
    ) -> JSONResponse:
        return validation_response(exc.errors())

    @app.exception_handler(SQLAlchemyError)
    async def handle_storage_error(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logfire.error(
            "Storage failure",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return domain_error_response(
            InternalError("Storage failure, retry the signed action")
        )


def timeout_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        content=error_body(
            "timeout", ErrorCode.TIMEOUT.value, "Request took too long to complete"
        ),
    )
