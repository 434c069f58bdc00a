"""Testes do composition root."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from app.bootstrap import (
    create_signup_store,
    create_user_store,
    initialize_app,
    validate_runtime_settings,
)
from app.infra.stores import MemorySignupStore, MemoryUserStore
from app.observability import correlation_scope


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("clear_settings_cache")
class TestStoreFactories:
    """Factories de stores."""

    def test_memory_backend_is_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SIGNUP_STORE_BACKEND", raising=False)

        assert isinstance(create_signup_store(), MemorySignupStore)
        assert isinstance(create_user_store(), MemoryUserStore)

    def test_each_call_returns_a_new_store(self) -> None:
        assert create_signup_store() is not create_signup_store()

    def test_unknown_backend_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIGNUP_STORE_BACKEND", "postgres")

        with pytest.raises(ValueError, match="SIGNUP_STORE_BACKEND"):
            create_signup_store()
        with pytest.raises(ValueError, match="SIGNUP_STORE_BACKEND"):
            create_user_store()


@pytest.mark.usefixtures("clear_settings_cache")
class TestValidateRuntimeSettings:
    """Validação de settings no startup."""

    def test_valid_settings_pass(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("SIGNUP_STORE_BACKEND", raising=False)

        validate_runtime_settings()

    def test_invalid_settings_only_warn_in_development(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("SIGNUP_STORE_BACKEND", "postgres")

        validate_runtime_settings()

    def test_invalid_settings_raise_in_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "*")

        with pytest.raises(RuntimeError, match="CORS_ALLOW_ORIGINS"):
            validate_runtime_settings()

    def test_production_with_explicit_origins_passes(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://beta.example.com")
        monkeypatch.delenv("SIGNUP_STORE_BACKEND", raising=False)

        validate_runtime_settings()


@pytest.mark.usefixtures("clear_settings_cache", "restore_root_logging")
class TestInitializeApp:
    """Logging configurado a partir das settings."""

    def test_log_records_carry_configured_service_and_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SERVICE_NAME", "landing-api")
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        initialize_app()

        (handler,) = logging.getLogger().handlers
        record = logging.LogRecord("test", logging.INFO, "", 0, "signup_created", (), None)
        with correlation_scope("corr-42"):
            assert handler.filter(record)
        payload = json.loads(handler.format(record))

        assert payload["service"] == "landing-api"
        assert payload["environment"] == "staging"
        assert payload["correlation_id"] == "corr-42"
        assert logging.getLogger().level == logging.DEBUG
