"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.beta_signup import api_router as beta_signup_api_router
from api.routes.beta_signup import form_capture_router
from api.routes.health.router import router as health_router


def create_api_router(*, form_capture_enabled: bool = True) -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Args:
        form_capture_enabled: Registra POST / (captura de formulário).

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        beta_signup_api_router,
        prefix="/api",
        tags=["beta-signup"],
    )

    if form_capture_enabled:
        api_router.include_router(form_capture_router, tags=["form-capture"])

    return api_router
