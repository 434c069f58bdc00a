"""Dependências FastAPI — acesso aos stores anexados em app.state.

Os stores são criados por app.app.create_app e injetados nos handlers
via Depends; nenhum handler acessa estado global de módulo.
"""

from __future__ import annotations

from fastapi import Request

from app.protocols.signup_store import SignupStoreProtocol


def get_signup_store(request: Request) -> SignupStoreProtocol:
    return request.app.state.signup_store
