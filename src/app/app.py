"""Entrypoint do serviço de beta signup.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import (
    create_signup_store,
    create_user_store,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import get_logger
from config.settings import get_base_settings, get_signup_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.protocols.signup_store import SignupStoreProtocol
    from app.protocols.user_store import UserStoreProtocol

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup valida settings; shutdown registra o total em memória descartado."""
    logger.info("app_starting")
    validate_runtime_settings()

    yield

    logger.info(
        "app_shutting_down",
        extra={
            "signups_discarded": app.state.signup_store.count_signups(),
        },
    )


def create_app(
    signup_store: SignupStoreProtocol | None = None,
    user_store: UserStoreProtocol | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        signup_store: Store de signups; padrão criado pelo bootstrap.
        user_store: Store de usuários; padrão criado pelo bootstrap.

    Returns:
        Aplicação FastAPI configurada, com stores em app.state.
    """
    base_settings = get_base_settings()
    signup_settings = get_signup_settings()

    fastapi_app = FastAPI(
        title="Beta Signup",
        description="Captura de pedidos de acesso beta da landing page",
        version="1.0.0",
        lifespan=lifespan,
        debug=base_settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.state.signup_store = (
        signup_store if signup_store is not None else create_signup_store()
    )
    fastapi_app.state.user_store = user_store if user_store is not None else create_user_store()

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(base_settings.cors_allow_origins),
        allow_credentials="*" not in base_settings.cors_allow_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(
        create_api_router(form_capture_enabled=signup_settings.form_capture_enabled)
    )

    logger.info(
        "app_configured",
        extra={
            "form_capture_enabled": signup_settings.form_capture_enabled,
        },
    )

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting beta-signup in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
