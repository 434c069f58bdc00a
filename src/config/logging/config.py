"""Configuração centralizada de logging.

Um único StreamHandler com formatter JSON e filter de contexto
(service, environment, correlation_id). Chamado uma vez pelo bootstrap.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import LogContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "beta-signup"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    environment: str = "development",
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço injetado em cada registro.
        correlation_id_getter: Função que retorna o correlation_id
            do contexto atual (ex: app.observability.get_correlation_id).
        environment: Ambiente injetado em cada registro.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        LogContextFilter(
            {"service": service_name, "environment": environment},
            correlation_id_getter,
        )
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação (ex: reload do uvicorn)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (geralmente __name__)."""
    return logging.getLogger(name)
