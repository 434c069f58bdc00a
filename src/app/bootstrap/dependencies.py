"""Factories de stores — criação de implementações concretas.

Lê SIGNUP_STORE_BACKEND (via SignupSettings). Apenas "memory" existe:
os dados vivem enquanto o processo estiver de pé.
"""

from __future__ import annotations

import logging

from app.infra.stores import MemorySignupStore, MemoryUserStore
from app.protocols.signup_store import SignupStoreProtocol
from app.protocols.user_store import UserStoreProtocol
from config.settings import get_base_settings, get_signup_settings

logger = logging.getLogger(__name__)


def create_signup_store() -> SignupStoreProtocol:
    """Cria store de signups conforme configuração.

    Raises:
        ValueError: Backend desconhecido.
    """
    backend = get_signup_settings().store_backend

    if backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("signup_store_created", extra={"backend": "memory"})
        return MemorySignupStore()

    msg = f"SIGNUP_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_user_store() -> UserStoreProtocol:
    """Cria store de usuários (mesmo backend dos signups)."""
    backend = get_signup_settings().store_backend

    if backend == "memory":
        logger.info("user_store_created", extra={"backend": "memory"})
        return MemoryUserStore()

    msg = f"SIGNUP_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)
