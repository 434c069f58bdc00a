"""Testes das entidades BetaSignup e User."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime

import pytest

from app.domain.beta_signup import BetaSignup
from app.domain.user import User


def _signup(message: str | None = "Interested") -> BetaSignup:
    return BetaSignup(
        id="abc",
        name="Alice",
        email="alice@acme.io",
        organization="Acme",
        message=message,
        created_at=datetime(2026, 10, 19, 12, 30, tzinfo=UTC),
    )


def test_to_dict_uses_wire_field_names() -> None:
    assert _signup().to_dict() == {
        "id": "abc",
        "name": "Alice",
        "email": "alice@acme.io",
        "organization": "Acme",
        "message": "Interested",
        "createdAt": "2026-10-19T12:30:00+00:00",
    }


def test_to_dict_keeps_null_message() -> None:
    assert _signup(message=None).to_dict()["message"] is None


def test_from_dict_restores_record() -> None:
    signup = _signup()
    assert BetaSignup.from_dict(signup.to_dict()) == signup


def test_signup_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        _signup().message = "changed"  # type: ignore[misc]


def test_user_to_dict() -> None:
    user = User(id="u1", username="alice", password="x")
    assert user.to_dict() == {"id": "u1", "username": "alice", "password": "x"}
