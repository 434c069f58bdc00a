"""Protocolo de persistência de pedidos de beta signup."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.beta_signup import BetaSignup


class SignupInput(Protocol):
    """Dados já validados na borda (ex: api.validators.beta_signup.BetaSignupInput)."""

    @property
    def name(self) -> str: ...

    @property
    def email(self) -> str: ...

    @property
    def organization(self) -> str: ...

    @property
    def message(self) -> str | None: ...


class SignupStoreProtocol(ABC):
    """Contrato do store de signups.

    Operações não falham em condições normais: não há limite de capacidade
    nem restrição de unicidade além do id gerado internamente.
    """

    @abstractmethod
    def create_signup(self, data: SignupInput) -> BetaSignup:
        """Cria registro com id e created_at gerados; message ausente/vazia vira None."""

    @abstractmethod
    def list_signups(self) -> list[BetaSignup]:
        """Snapshot de todos os registros (ordem não faz parte do contrato)."""

    @abstractmethod
    def count_signups(self) -> int: ...
