"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from api.routes.health.router import readiness_check
from app.app import create_app
from app.infra.stores import MemorySignupStore, MemoryUserStore


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


def test_health_returns_healthy(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "healthy"
    assert payload["service"] == "beta-signup"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_stores() -> None:
    request = _build_request_with_state(SimpleNamespace())

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["signup_store"]["error"] == "not_configured"
    assert payload["checks"]["user_store"]["status"] == "failed"


@pytest.mark.asyncio
async def test_readiness_returns_ready_with_store_size() -> None:
    signup_store = MemorySignupStore()
    request = _build_request_with_state(
        SimpleNamespace(signup_store=signup_store, user_store=MemoryUserStore())
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["signup_store"]["status"] == "ok"
    assert payload["checks"]["signup_store"]["size"] == 0


@pytest.mark.asyncio
async def test_readiness_fails_when_signup_store_raises() -> None:
    broken_store = MagicMock()
    broken_store.count_signups.side_effect = RuntimeError("boom")
    request = _build_request_with_state(
        SimpleNamespace(signup_store=broken_store, user_store=MemoryUserStore())
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["signup_store"]["error"] == "RuntimeError"


def test_ready_endpoint_through_app(client: TestClient) -> None:
    client.post(
        "/api/beta-signup",
        json={"name": "Alice", "email": "alice@acme.io", "organization": "Acme"},
    )

    response = client.get("/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["signup_store"]["size"] == 1


@pytest.mark.usefixtures("clear_settings_cache")
def test_health_reports_configured_service_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "landing-api")

    with TestClient(create_app()) as test_client:
        response = test_client.get("/health")

    assert response.json()["service"] == "landing-api"
