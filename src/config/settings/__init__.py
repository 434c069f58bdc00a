"""Agregador de settings do serviço de beta signup.

Re-exporta settings e getters cacheados de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.signup import (
    SignupSettings,
    get_signup_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "SignupSettings",
    "get_base_settings",
    "get_signup_settings",
]
