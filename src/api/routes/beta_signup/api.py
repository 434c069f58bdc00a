"""Endpoints JSON de beta signup.

Endpoints:
- POST /api/beta-signup: valida e cria pedido de acesso beta
- GET /api/beta-signups: lista todos os pedidos (uso administrativo)

Erros:
- 400 com `details` por campo quando o payload viola o schema
- 500 genérico para qualquer outra falha
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from api.routes.beta_signup.responses import (
    internal_error_response,
    success_response,
    validation_failed_response,
)
from api.routes.dependencies import get_signup_store
from api.validators.beta_signup import FieldError, SignupValidation, parse_beta_signup
from app.observability import (
    CORRELATION_HEADER,
    correlation_scope,
    record_latency,
    record_signup_created,
)
from app.protocols.signup_store import SignupStoreProtocol

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_JSON_ERROR = FieldError(
    path=(),
    message="Request body must be valid JSON",
    code="invalid_json",
)


async def _parse_json_body(request: Request) -> SignupValidation:
    try:
        payload = await request.json()
    except ValueError:
        return SignupValidation.failure((INVALID_JSON_ERROR,))
    return parse_beta_signup(payload)


@router.post("/beta-signup", response_model=None, status_code=status.HTTP_201_CREATED)
async def create_beta_signup(
    request: Request,
    store: SignupStoreProtocol = Depends(get_signup_store),
) -> JSONResponse:
    """Cria pedido de acesso beta.

    Body JSON: {name, email, organization, message?}

    Returns:
        201 com o registro criado, 400 para payload inválido, 500 em falha inesperada.
    """
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        started_at = time.perf_counter()
        try:
            validation = await _parse_json_body(request)
            if not validation.ok:
                logger.warning(
                    "beta_signup_validation_failed",
                    extra={
                        "source": "api",
                        "error_count": len(validation.errors),
                        "fields": [".".join(map(str, e.path)) for e in validation.errors],
                    },
                )
                return validation_failed_response(validation.errors, correlation_id)

            signup = store.create_signup(validation.unwrap())
        except Exception:
            logger.exception("beta_signup_create_failed", extra={"source": "api"})
            return internal_error_response(correlation_id)

        record_latency("beta_signup", "create", (time.perf_counter() - started_at) * 1000)
        record_signup_created("api")
        logger.info("beta_signup_created", extra={"source": "api", "signup_id": signup.id})
        return success_response(
            signup.to_dict(),
            correlation_id,
            status_code=status.HTTP_201_CREATED,
        )


@router.get("/beta-signups", response_model=None)
async def list_beta_signups(
    request: Request,
    store: SignupStoreProtocol = Depends(get_signup_store),
) -> JSONResponse:
    """Lista todos os pedidos de acesso beta."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        started_at = time.perf_counter()
        try:
            signups = store.list_signups()
        except Exception:
            logger.exception("beta_signup_list_failed")
            return internal_error_response(correlation_id)

        record_latency("beta_signup", "list", (time.perf_counter() - started_at) * 1000)
        logger.info("beta_signups_listed", extra={"count": len(signups)})
        return success_response([signup.to_dict() for signup in signups], correlation_id)
