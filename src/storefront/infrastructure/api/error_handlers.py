"""Maps exceptions to enveloped JSON responses.

Domain errors are raised by the services and caught here, once:

- request shape errors and DomainValidationError -> 400 BAD_REQUEST
- EntityNotFoundError                             -> 404 NOT_FOUND
- BusinessRuleViolation                           -> 409 CONFLICT
- anything else                                   -> 500 INTERNAL_ERROR
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.domain.exceptions import (
    BusinessRuleViolation,
    DomainValidationError,
    EntityNotFoundError,
)
from storefront.infrastructure.api.responses import (
    bad_request_response,
    conflict_response,
    error_response,
    internal_error_response,
    not_found_response,
)

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_409_CONFLICT: "CONFLICT",
}


def _describe(error: dict[str, Any]) -> str:
    """Render one pydantic error as ``field: message``."""
    field = ".".join(str(part) for part in error["loc"][1:])
    message = error["msg"].removeprefix("Value error, ")
    return f"{field}: {message}" if field else message


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    if any(e["type"] == "json_invalid" for e in errors):
        return "Invalid JSON in request body"
    if errors and all(e["loc"][0] == "path" for e in errors):
        prefix = "Invalid parameters"
    else:
        prefix = "Validation failed"
    return f"{prefix}: {', '.join(_describe(e) for e in errors)}"


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = format_validation_errors(list(exc.errors()))
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return bad_request_response(message)

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(
        request: Request, exc: DomainValidationError
    ) -> JSONResponse:
        return bad_request_response(str(exc))

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return not_found_response(str(exc))

    @app.exception_handler(BusinessRuleViolation)
    async def conflict_handler(request: Request, exc: BusinessRuleViolation) -> JSONResponse:
        return conflict_response(str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(
            str(exc.detail), exc.status_code, _STATUS_CODES.get(exc.status_code)
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error in %s %s", request.method, request.url.path)
        return internal_error_response()
