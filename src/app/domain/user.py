"""User — conta de usuário.

Sem fluxo ativo no serviço: reservado para autenticação futura.
Não possui acoplamento com o fluxo de beta signup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class NewUser:
    """Dados de criação de usuário."""

    username: str
    password: str


@dataclass(frozen=True, slots=True)
class User:
    """Usuário persistido."""

    id: str
    username: str
    password: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username, "password": self.password}
