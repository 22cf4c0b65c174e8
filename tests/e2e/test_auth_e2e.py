"""Testes E2E de autenticação usando Playwright."""

from __future__ import annotations

import pytest

pytestmark = [pytest.mark.e2e]


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_login_success_returns_token(api_request_context, registered_customer, customer_credentials):
    response = api_request_context.post(
        "/api/v1/clientes/login",
        data={"nome": customer_credentials["nome"], "senha": customer_credentials["senha"]},
    )

    assert response.status == 200
    data = response.json()
    assert data["cliente"]["id"] == registered_customer["cliente"]["id"]
    assert data["token"]


def test_login_invalid_password_returns_401(
    api_request_context, registered_customer, customer_credentials
):
    response = api_request_context.post(
        "/api/v1/clientes/login",
        data={"nome": customer_credentials["nome"], "senha": "senha-errada"},
    )

    assert response.status == 401
    assert response.json() == {"error": "Nome ou senha incorretos"}


def test_token_opens_only_own_profile(api_request_context, registered_customer):
    customer_id = registered_customer["cliente"]["id"]
    headers = auth_headers(registered_customer["token"])

    own = api_request_context.get(f"/api/v1/clientes/{customer_id}", headers=headers)
    whoami = api_request_context.get("/api/v1/me", headers=headers)
    anonymous = api_request_context.get(f"/api/v1/clientes/{customer_id}")

    assert own.status == 200
    assert whoami.json()["id"] == customer_id
    assert whoami.json()["role"] == "cliente"
    assert anonymous.status == 401
