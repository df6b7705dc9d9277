"""JSON envelope shared by every endpoint.

Success: ``{"success": true, "data": ...}``
Failure: ``{"success": false, "error": {"message": ..., "code": ...}}``
"""

from __future__ import annotations

from typing import Any

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": jsonable_encoder(data)},
    )


def created_response(data: Any) -> JSONResponse:
    return success_response(data, status.HTTP_201_CREATED)


def no_content_response() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def error_response(
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    code: str | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"message": message, "code": code}},
    )


def not_found_response(message: str = "Resource not found") -> JSONResponse:
    return error_response(message, status.HTTP_404_NOT_FOUND, "NOT_FOUND")


def bad_request_response(message: str) -> JSONResponse:
    return error_response(message, status.HTTP_400_BAD_REQUEST, "BAD_REQUEST")


def conflict_response(message: str) -> JSONResponse:
    return error_response(message, status.HTTP_409_CONFLICT, "CONFLICT")


def internal_error_response(message: str = "Internal server error") -> JSONResponse:
    return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR")
