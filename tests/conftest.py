"""Configuração do pytest para o serviço de beta signup."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fastapi.testclient import TestClient  # noqa: E402

from app.infra.stores import MemorySignupStore, MemoryUserStore  # noqa: E402
from config.settings import get_base_settings, get_signup_settings  # noqa: E402


def _clear_settings_cache() -> None:
    get_base_settings.cache_clear()
    get_signup_settings.cache_clear()


@pytest.fixture
def clear_settings_cache() -> Iterator[None]:
    """Limpa settings cacheadas antes e depois do teste (uso com monkeypatch.setenv)."""
    _clear_settings_cache()
    yield
    _clear_settings_cache()


@pytest.fixture
def signup_store() -> MemorySignupStore:
    return MemorySignupStore()


@pytest.fixture
def user_store() -> MemoryUserStore:
    return MemoryUserStore()


@pytest.fixture
def client(signup_store: MemorySignupStore, user_store: MemoryUserStore) -> Iterator[TestClient]:
    """TestClient com stores isolados por teste."""
    from app.app import create_app

    with TestClient(create_app(signup_store=signup_store, user_store=user_store)) as test_client:
        yield test_client
