"""Envelopes JSON das respostas de beta signup.

Sucesso: {"success": true, "data": ...}
Falha:   {"success": false, "error": "...", "details"?: [...]}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import status
from fastapi.responses import JSONResponse

from app.observability import CORRELATION_HEADER

if TYPE_CHECKING:
    from collections.abc import Iterable

    from api.validators.beta_signup import FieldError

VALIDATION_FAILED = "Validation failed"
INTERNAL_ERROR = "Internal server error"
UNKNOWN_FORM = "Unknown form"


def _headers(correlation_id: str) -> dict[str, str]:
    return {CORRELATION_HEADER: correlation_id}


def success_response(
    data: Any,
    correlation_id: str,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    content: dict[str, Any] = {"success": True}
    if data is not None:
        content["data"] = data
    return JSONResponse(content=content, status_code=status_code, headers=_headers(correlation_id))


def validation_failed_response(errors: Iterable[FieldError], correlation_id: str) -> JSONResponse:
    """400 com um item em `details` por campo violado."""
    return JSONResponse(
        content={
            "success": False,
            "error": VALIDATION_FAILED,
            "details": [error.as_dict() for error in errors],
        },
        status_code=status.HTTP_400_BAD_REQUEST,
        headers=_headers(correlation_id),
    )


def error_response(error: str, status_code: int, correlation_id: str) -> JSONResponse:
    return JSONResponse(
        content={"success": False, "error": error},
        status_code=status_code,
        headers=_headers(correlation_id),
    )


def internal_error_response(correlation_id: str) -> JSONResponse:
    """500 genérico: nenhum detalhe interno é exposto."""
    return error_response(INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR, correlation_id)
