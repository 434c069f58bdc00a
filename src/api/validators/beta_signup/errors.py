"""Erros estruturados de validação do beta signup."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FieldError:
    """Violação de um campo do payload.

    Attributes:
        path: Caminho do campo (vazio quando o payload inteiro é inválido)
        message: Motivo legível para exibição ao usuário
        code: Código estável da violação (ex: "required", "value_error")
    """

    path: tuple[str | int, ...]
    message: str
    code: str

    def as_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "message": self.message, "code": self.code}


class ValidationError(ValueError):
    """Payload de signup rejeitado; carrega os erros por campo."""

    def __init__(self, errors: Sequence[FieldError]) -> None:
        self.errors: tuple[FieldError, ...] = tuple(errors)
        fields = ", ".join(".".join(str(p) for p in e.path) or "<payload>" for e in self.errors)
        super().__init__(f"Validation failed: {fields}")

    def details(self) -> list[dict[str, Any]]:
        """Erros no formato do campo `details` da resposta HTTP."""
        return [error.as_dict() for error in self.errors]
