"""Integration tests for the flat ``{"error": ...}`` envelope.

Every failure, whatever raised it (domain error, DRF authentication,
request parsing, unknown route), renders as a single human readable
message under ``error``.
"""

from uuid import uuid4

import pytest

from django.db import DatabaseError

pytestmark = pytest.mark.integration


class TestErrorEnvelope:
    def test_missing_token(self, api_client):
        response = api_client.get("/api/v1/estabelecimentos")
        assert response.status_code == 401
        assert response["WWW-Authenticate"].startswith("Bearer")
        assert list(response.json()) == ["error"]

    def test_invalid_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer not.a.token")
        response = api_client.get("/api/v1/estabelecimentos")
        assert response.status_code == 401
        assert response.json() == {"error": "Token inválido ou expirado"}

    def test_malformed_json(self, api_client):
        response = api_client.post(
            "/api/v1/clientes/register", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        assert isinstance(response.json()["error"], str)

    def test_validation_error_names_wire_fields(self, api_client):
        response = api_client.post("/api/v1/entregadores/register", {}, format="json")
        assert response.status_code == 400
        assert response.json() == {"error": "Dados inválidos: nome, senha"}

    def test_forbidden(self, customer_client, other_customer):
        response = customer_client.get(f"/api/v1/clientes/{other_customer.id}")
        assert response.json() == {"error": "Acesso negado"}

    def test_not_found(self, customer_client):
        response = customer_client.get(f"/api/v1/pedidos/{uuid4()}")
        assert response.status_code == 404
        assert response.json() == {"error": "Pedido não encontrado"}

    def test_method_not_allowed(self, customer_client):
        response = customer_client.patch("/api/v1/sabores")
        assert response.status_code == 405
        assert list(response.json()) == ["error"]

    def test_unrouted_path(self, client):
        response = client.get("/nao-existe")
        assert response.status_code == 404
        assert response.json() == {"error": "Recurso não encontrado"}

    def test_persistence_failure_is_500(self, customer_client, customer, monkeypatch):
        def _boom(*args, **kwargs):
            raise DatabaseError("connection lost")

        monkeypatch.setattr(
            "modules.customers.repositories.django_repository.CustomerDjangoRepository.get_by_id",
            _boom,
        )
        response = customer_client.get(f"/api/v1/clientes/{customer.id}")
        assert response.status_code == 500
        assert response.json() == {"error": "Erro interno do servidor"}
