"""Logging estruturado JSON do serviço de beta signup.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="beta-signup")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("signup_created", extra={"signup_id": "abc"})

Campos presentes em todo log: asctime, level, logger, message,
correlation_id, service, environment. Nunca registrar email ou mensagem do lead.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import LogContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "LogContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
