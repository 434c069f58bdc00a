"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e expõe as
factories de stores. Stores não são singletons de módulo: cada app
criada por app.app.create_app recebe suas próprias instâncias.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import create_signup_store, create_user_store
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_signup_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        environment=base.environment,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` apenas registra alerta.

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"signup: {error}" for error in get_signup_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "create_signup_store",
    "create_user_store",
    "initialize_app",
    "validate_runtime_settings",
]
