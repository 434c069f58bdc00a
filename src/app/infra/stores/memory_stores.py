"""Stores em memória, única fonte de verdade enquanto o processo vive.

Sem persistência entre reinícios. Cada instância da aplicação recebe
seus próprios stores (ver app.bootstrap.dependencies).
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.beta_signup import BetaSignup
from app.domain.user import NewUser, User
from app.protocols.signup_store import SignupStoreProtocol
from app.protocols.user_store import UserStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.signup_store import SignupInput

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid.uuid4())


class MemorySignupStore(SignupStoreProtocol):
    """Store de signups em memória, indexado por id."""

    def __init__(
        self,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._signups: dict[str, BetaSignup] = {}
        self._clock = clock
        self._id_factory = id_factory

    def create_signup(self, data: SignupInput) -> BetaSignup:
        """Cria e armazena signup.

        message ausente ou vazia é normalizada para None.
        """
        signup = BetaSignup(
            id=self._id_factory(),
            name=data.name,
            email=str(data.email),
            organization=data.organization,
            message=data.message or None,
            created_at=self._clock(),
        )
        self._signups[signup.id] = signup
        logger.debug("signup_stored", extra={"signup_id": signup.id})
        return signup

    def list_signups(self) -> list[BetaSignup]:
        """Retorna cópia da coleção atual."""
        return list(self._signups.values())

    def count_signups(self) -> int:
        return len(self._signups)


class MemoryUserStore(UserStoreProtocol):
    """Store de usuários em memória (scaffolding, sem rota HTTP)."""

    def __init__(self, id_factory: Callable[[], str] = _new_id) -> None:
        self._users: dict[str, User] = {}
        self._id_factory = id_factory

    def create_user(self, data: NewUser) -> User:
        user = User(id=self._id_factory(), username=data.username, password=data.password)
        self._users[user.id] = user
        logger.debug("user_stored", extra={"user_id": user.id})
        return user

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        """Busca linear por username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def list_users(self) -> list[User]:
        return list(self._users.values())
