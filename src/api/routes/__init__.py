"""Rotas HTTP da API.

Estrutura:
- routes/beta_signup/: API JSON (/api/beta-signup, /api/beta-signups)
  e captura de formulário da landing page (POST /)
- routes/health/: health checks e readiness
- dependencies.py: injeção dos stores de app.state nos handlers

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
