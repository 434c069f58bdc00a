"""BetaSignup — pedido de acesso antecipado capturado pela landing page.

Registro imutável: criado apenas pelo store de signup, nunca atualizado
ou removido. `id` e `created_at` são sempre atribuídos pelo servidor.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class BetaSignup:
    """Pedido de beta persistido.

    Attributes:
        id: Identificador opaco (UUID4), único durante a vida do processo
        name: Nome completo do lead
        email: Email do lead
        organization: Empresa/organização
        message: Caso de uso descrito pelo lead (None quando ausente)
        created_at: Momento da criação (UTC)
    """

    id: str
    name: str
    email: str
    organization: str
    message: str | None
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Converte para o formato de resposta da API (camelCase)."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "organization": self.organization,
            "message": self.message,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BetaSignup:
        """Cria a partir do formato de resposta da API."""
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            organization=data["organization"],
            message=data.get("message"),
            created_at=datetime.fromisoformat(data["createdAt"]),
        )
