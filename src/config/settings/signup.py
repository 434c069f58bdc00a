"""Settings do fluxo de beta signup.

Backend de armazenamento e captura de formulário (form-capture em `/`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

VALID_STORE_BACKENDS = frozenset({"memory"})


@dataclass(frozen=True)
class SignupSettings:
    """Configurações de signup.

    Attributes:
        store_backend: Backend dos stores de signup e usuário (apenas memory)
        form_capture_enabled: Registra o endpoint de captura de formulário em `/`
        form_capture_name: Valor esperado do campo `form-name`
    """

    store_backend: str = "memory"
    form_capture_enabled: bool = True
    form_capture_name: str = "beta-signup"

    def validate(self) -> list[str]:
        """Valida configurações de signup."""
        errors: list[str] = []

        if self.store_backend not in VALID_STORE_BACKENDS:
            errors.append(f"SIGNUP_STORE_BACKEND inválido: {self.store_backend}")

        if self.form_capture_enabled and not self.form_capture_name:
            errors.append("FORM_CAPTURE_NAME não pode ser vazio com captura habilitada")

        return errors


def _load_signup_from_env() -> SignupSettings:
    """Carrega SignupSettings de variáveis de ambiente."""
    return SignupSettings(
        store_backend=os.getenv("SIGNUP_STORE_BACKEND", "memory").lower(),
        form_capture_enabled=os.getenv("FORM_CAPTURE_ENABLED", "true").lower()
        in ("true", "1", "yes"),
        form_capture_name=os.getenv("FORM_CAPTURE_NAME", "beta-signup"),
    )


@lru_cache(maxsize=1)
def get_signup_settings() -> SignupSettings:
    """Retorna instância cacheada de SignupSettings."""
    return _load_signup_from_env()
