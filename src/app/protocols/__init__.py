"""Protocolos e contratos do core da aplicação."""

from .signup_store import SignupInput, SignupStoreProtocol
from .user_store import UserStoreProtocol

__all__ = [
    "SignupInput",
    "SignupStoreProtocol",
    "UserStoreProtocol",
]
