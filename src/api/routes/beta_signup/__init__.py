"""Rotas de beta signup: API JSON e captura de formulário."""

from __future__ import annotations

from api.routes.beta_signup.api import router as api_router
from api.routes.beta_signup.form_capture import router as form_capture_router

__all__ = ["api_router", "form_capture_router"]
