"""Testes da captura de formulário da landing page (POST /)."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.infra.stores import MemorySignupStore

FORM = {
    "form-name": "beta-signup",
    "name": "Alice",
    "email": "alice@acme.io",
    "organization": "Acme",
    "message": "",
}


def test_form_submission_is_stored(client: TestClient, signup_store: MemorySignupStore) -> None:
    response = client.post("/", data=FORM)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    (signup,) = signup_store.list_signups()
    assert signup.name == "Alice"
    assert signup.organization == "Acme"
    assert signup.message is None


def test_form_submission_keeps_message(
    client: TestClient, signup_store: MemorySignupStore
) -> None:
    response = client.post("/", data={**FORM, "message": "Automating invoices"})

    assert response.status_code == 200
    assert signup_store.list_signups()[0].message == "Automating invoices"


def test_form_submission_is_listed_by_json_api(client: TestClient) -> None:
    client.post("/", data=FORM)

    data = client.get("/api/beta-signups").json()["data"]

    assert [item["email"] for item in data] == ["alice@acme.io"]


def test_unknown_form_name_returns_404(
    client: TestClient, signup_store: MemorySignupStore
) -> None:
    response = client.post("/", data={**FORM, "form-name": "newsletter"})

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Unknown form"}
    assert signup_store.count_signups() == 0


def test_missing_form_name_returns_404(client: TestClient) -> None:
    payload = {k: v for k, v in FORM.items() if k != "form-name"}
    response = client.post("/", data=payload)
    assert response.status_code == 404


@pytest.mark.parametrize("field", ["name", "email", "organization"])
def test_missing_required_field_returns_400(
    client: TestClient, signup_store: MemorySignupStore, field: str
) -> None:
    payload = {k: v for k, v in FORM.items() if k != field}

    response = client.post("/", data=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert [tuple(item["path"]) for item in body["details"]] == [(field,)]
    assert signup_store.count_signups() == 0


def test_invalid_email_returns_400(client: TestClient) -> None:
    response = client.post("/", data={**FORM, "email": "bad-email"})

    assert response.status_code == 400
    assert response.json()["details"][0]["message"] == "Please enter a valid email address"


def test_empty_name_reports_same_code_as_json_api(client: TestClient) -> None:
    form_response = client.post("/", data={**FORM, "name": ""})
    json_response = client.post(
        "/api/beta-signup",
        json={"name": "", "email": "alice@acme.io", "organization": "Acme"},
    )

    (form_error,) = form_response.json()["details"]
    (json_error,) = json_response.json()["details"]
    assert form_error == json_error
    assert form_error["code"] == "required"
