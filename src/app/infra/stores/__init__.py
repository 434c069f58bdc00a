"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - memory_stores: Stores em memória de signups e usuários
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemorySignupStore, MemoryUserStore

__all__ = [
    "MemorySignupStore",
    "MemoryUserStore",
]
