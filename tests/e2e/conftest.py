"""E2E test fixtures for Playwright.

The pytest-playwright plugin automatically provides:
  - page: A new browser page for each test
  - context: A new browser context for each test
  - browser: A browser instance (session scope)

Override base_url with --base-url on the CLI:
    pytest -m e2e --base-url http://localhost:8000

Principals are registered through the public API with unique names, so
the suite runs against any server without touching its database directly.
"""

from __future__ import annotations

from typing import Generator
from uuid import uuid4

import pytest
from playwright.sync_api import APIRequestContext, Playwright


@pytest.fixture(scope="session")
def base_url(request) -> str:
    """Provide base URL for Playwright tests.

    Uses --base-url CLI value if given, otherwise defaults to the
    Django dev server running inside the Docker container.
    """
    return request.config.getoption("base_url") or "http://localhost:8000"


@pytest.fixture(autouse=True)
def _use_db() -> None:
    """Override root conftest _use_db: e2e tests hit the server over HTTP,
    they do not need the pytest-django ``db`` fixture (which conflicts
    with Playwright's async event-loop)."""


@pytest.fixture(scope="session")
def api_request_context(
    playwright: Playwright, base_url: str
) -> Generator[APIRequestContext, None, None]:
    """Contexto de API do Playwright para chamadas HTTP diretas."""
    context = playwright.request.new_context(base_url=base_url)
    yield context
    context.dispose()


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _register(api_request_context, resource: str, payload: dict) -> dict:
    response = api_request_context.post(f"/api/v1/{resource}/register", data=payload)
    assert response.status == 201, response.text()
    return response.json()


@pytest.fixture()
def customer_credentials() -> dict[str, str]:
    return {"nome": f"cliente-e2e-{uuid4().hex[:8]}", "senha": "senha123", "endereco": "Rua E2E, 1"}


@pytest.fixture()
def registered_customer(api_request_context, customer_credentials) -> Generator[dict, None, None]:
    """Cliente registrado via API; removido ao final do teste."""
    body = _register(api_request_context, "clientes", customer_credentials)
    yield body
    api_request_context.delete(
        f"/api/v1/clientes/{body['cliente']['id']}", headers=auth_headers(body["token"])
    )


@pytest.fixture()
def registered_establishment(api_request_context) -> Generator[dict, None, None]:
    body = _register(
        api_request_context,
        "estabelecimentos",
        {"nome": f"pizzaria-e2e-{uuid4().hex[:8]}", "codigo_acesso": "123456"},
    )
    yield body
    api_request_context.delete(
        f"/api/v1/estabelecimentos/{body['estabelecimento']['id']}",
        headers=auth_headers(body["token"]),
    )
