"""Protocolo de persistência de usuários.

Sem uso no fluxo de signup; mantido para autenticação futura.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.user import NewUser, User


class UserStoreProtocol(ABC):
    """Contrato do store de usuários.

    Buscas sem resultado retornam None (não é erro).
    """

    @abstractmethod
    def create_user(self, data: NewUser) -> User: ...

    @abstractmethod
    def get_user(self, user_id: str) -> User | None: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    def list_users(self) -> list[User]: ...
