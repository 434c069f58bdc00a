"""Captura de formulário da landing page (POST /).

O client envia os mesmos campos do signup como
application/x-www-form-urlencoded, com `form-name` identificando o
formulário. O payload passa pela mesma validação e pelo mesmo store
da API JSON; a resposta só tem contrato de status HTTP.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import JSONResponse

from api.routes.beta_signup.responses import (
    UNKNOWN_FORM,
    error_response,
    internal_error_response,
    success_response,
    validation_failed_response,
)
from api.routes.dependencies import get_signup_store
from api.validators.beta_signup import parse_beta_signup
from app.observability import CORRELATION_HEADER, correlation_scope, record_signup_created
from app.protocols.signup_store import SignupStoreProtocol
from config.settings import get_signup_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=None)
async def capture_form(
    request: Request,
    form_name: str | None = Form(default=None, alias="form-name"),
    name: str | None = Form(default=None),
    email: str | None = Form(default=None),
    organization: str | None = Form(default=None),
    message: str | None = Form(default=None),
    store: SignupStoreProtocol = Depends(get_signup_store),
) -> JSONResponse:
    """Recebe submissão do formulário `beta-signup`.

    Returns:
        200 quando armazenado, 404 para form-name desconhecido,
        400 para campos inválidos, 500 em falha inesperada.
    """
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        expected_form = get_signup_settings().form_capture_name
        if form_name != expected_form:
            logger.warning("form_capture_unknown_form", extra={"form_name": form_name})
            return error_response(UNKNOWN_FORM, status.HTTP_404_NOT_FOUND, correlation_id)

        try:
            validation = parse_beta_signup(
                {
                    "name": name,
                    "email": email,
                    "organization": organization,
                    "message": message,
                }
            )
            if not validation.ok:
                logger.warning(
                    "beta_signup_validation_failed",
                    extra={"source": "form", "error_count": len(validation.errors)},
                )
                return validation_failed_response(validation.errors, correlation_id)

            signup = store.create_signup(validation.unwrap())
        except Exception:
            logger.exception("beta_signup_create_failed", extra={"source": "form"})
            return internal_error_response(correlation_id)

        record_signup_created("form")
        logger.info("beta_signup_created", extra={"source": "form", "signup_id": signup.id})
        return success_response(None, correlation_id)
