"""Registro de métricas via structured logging.

As métricas são logs estruturados (`metric_type` no extra) agregados
posteriormente pelo backend de logs.

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("beta_signup", "create", (time.perf_counter() - start) * 1000)
    record_signup_created("api")
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "beta_signup")
        operation: Nome da operação (ex: "create", "list")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (padrão: o do contexto atual)
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )


def record_signup_created(source: str, correlation_id: str | None = None) -> None:
    """Counter de signups criados por canal de entrada ("api" ou "form")."""
    logger.info(
        "metric_signup_created",
        extra={
            "metric_type": "counter",
            "source": source,
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )
