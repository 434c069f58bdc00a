"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    latency_ms: float | None = None
    error: str | None = None
    size: int | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
            "size": self.size,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe — stores anexados à aplicação e respondendo."""
    signup_check = _check_signup_store(getattr(request.app.state, "signup_store", None))
    user_check = _check_user_store(getattr(request.app.state, "user_store", None))

    ready = signup_check.status == "ok" and user_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "signup_store": signup_check.as_dict(),
            "user_store": user_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_signup_store(store: Any | None) -> DependencyCheck:
    if store is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        size = store.count_signups()
    except Exception as exc:
        logger.warning("readiness_signup_store_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2), size=size)


def _check_user_store(store: Any | None) -> DependencyCheck:
    if store is None:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")
