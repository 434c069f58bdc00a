"""Observabilidade — correlation_id e métricas via logs estruturados."""

from app.observability.correlation import (
    CORRELATION_HEADER,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency, record_signup_created

__all__ = [
    "CORRELATION_HEADER",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "record_latency",
    "record_signup_created",
    "reset_correlation_id",
    "set_correlation_id",
]
