"""Integration tests for Customer API endpoints.

Covers:
- register / login via /api/v1/clientes.
- Self-only access to /clientes/:id (403 for others, 401 without token).
- Update and delete through the API, with cascades.
- Interest registration on a flavor.
"""

from __future__ import annotations

from uuid import uuid4

import pytest

from modules.customers.models import Customer, Interest
from modules.orders.models import Order

pytestmark = pytest.mark.integration

BASE = "/api/v1/clientes"


# ===========================================================================
# Session
# ===========================================================================


class TestCustomerSession:
    def test_register_returns_customer_and_token(self, api_client):
        response = api_client.post(
            f"{BASE}/register",
            {"nome": "Ana", "senha": "senha123", "endereco": "Rua A, 1"},
            format="json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["cliente"]["nome"] == "Ana"
        assert data["cliente"]["endereco"] == "Rua A, 1"
        assert "senha" not in data["cliente"]
        assert data["token"]

    def test_register_duplicate_name_writes_nothing(self, api_client, customer):
        response = api_client.post(
            f"{BASE}/register", {"nome": customer.name, "senha": "outra"}, format="json"
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Cliente já existe"}
        assert Customer.objects.filter(name=customer.name).count() == 1

    def test_register_missing_fields(self, api_client):
        response = api_client.post(f"{BASE}/register", {"nome": "Ana"}, format="json")

        assert response.status_code == 400
        assert response.json() == {"error": "Dados inválidos: senha"}
        assert not Customer.objects.exists()

    def test_login(self, api_client, customer):
        response = api_client.post(
            f"{BASE}/login", {"nome": "Ana", "senha": "senha123"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["cliente"]["id"] == str(customer.id)

    def test_login_strips_name_like_registration(self, api_client):
        registered = api_client.post(
            f"{BASE}/register", {"nome": "Ana ", "senha": "senha123"}, format="json"
        )
        response = api_client.post(
            f"{BASE}/login", {"nome": " Ana ", "senha": "senha123"}, format="json"
        )

        assert registered.json()["cliente"]["nome"] == "Ana"
        assert response.status_code == 200
        assert response.json()["cliente"]["id"] == registered.json()["cliente"]["id"]

    @pytest.mark.parametrize(
        "payload",
        [{"nome": "Ana", "senha": "errada"}, {"nome": "Ninguem", "senha": "senha123"}, {}],
    )
    def test_login_failures(self, api_client, customer, payload):
        response = api_client.post(f"{BASE}/login", payload, format="json")

        assert response.status_code == 401
        assert response.json() == {"error": "Nome ou senha incorretos"}

    def test_token_from_login_opens_own_profile(self, api_client, customer):
        token = api_client.post(
            f"{BASE}/login", {"nome": "Ana", "senha": "senha123"}, format="json"
        ).json()["token"]

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        response = api_client.get(f"{BASE}/{customer.id}")

        assert response.status_code == 200
        assert response.json()["nome"] == "Ana"


# ===========================================================================
# Access guard
# ===========================================================================


class TestCustomerAccess:
    def test_no_token(self, api_client, customer):
        response = api_client.get(f"{BASE}/{customer.id}")
        assert response.status_code == 401
        assert "error" in response.json()

    def test_malformed_header(self, api_client, customer):
        api_client.credentials(HTTP_AUTHORIZATION="Token abc")
        assert api_client.get(f"{BASE}/{customer.id}").status_code == 401

    def test_other_customer(self, customer_client, other_customer):
        response = customer_client.get(f"{BASE}/{other_customer.id}")
        assert response.status_code == 403
        assert response.json() == {"error": "Acesso negado"}

    def test_unknown_id_is_forbidden_too(self, customer_client):
        assert customer_client.get(f"{BASE}/{uuid4()}").status_code == 403

    def test_other_roles(self, establishment_client, customer):
        assert establishment_client.get(f"{BASE}/{customer.id}").status_code == 403

    def test_forbidden_update_writes_nothing(self, customer_client, other_customer):
        response = customer_client.put(
            f"{BASE}/{other_customer.id}", {"nome": "Hacker"}, format="json"
        )
        assert response.status_code == 403
        other_customer.refresh_from_db()
        assert other_customer.name == "Bruno"

    def test_non_uuid_path(self, customer_client):
        response = customer_client.get(f"{BASE}/123")
        assert response.status_code == 404
        assert response.json() == {"error": "Recurso não encontrado"}

    @pytest.mark.parametrize("suffix", ["", "/historico-pedidos", "/notificacoes", "/cardapio"])
    def test_uppercase_id_is_unrouted_everywhere(self, customer_client, customer, suffix):
        response = customer_client.get(f"{BASE}/{str(customer.id).upper()}{suffix}")
        assert response.status_code == 404
        assert response.json() == {"error": "Recurso não encontrado"}


# ===========================================================================
# UPDATE / DELETE
# ===========================================================================


class TestCustomerUpdate:
    def test_update_address(self, customer_client, customer):
        response = customer_client.put(
            f"{BASE}/{customer.id}", {"endereco": "Rua Nova, 10"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["endereco"] == "Rua Nova, 10"
        customer.refresh_from_db()
        assert customer.address == "Rua Nova, 10"

    def test_update_secret_then_login(self, customer_client, api_client, customer):
        customer_client.put(f"{BASE}/{customer.id}", {"senha": "nova-senha"}, format="json")

        old = api_client.post(f"{BASE}/login", {"nome": "Ana", "senha": "senha123"}, format="json")
        new = api_client.post(
            f"{BASE}/login", {"nome": "Ana", "senha": "nova-senha"}, format="json"
        )
        assert old.status_code == 401
        assert new.status_code == 200

    def test_rename_to_taken_name(self, customer_client, customer, other_customer):
        response = customer_client.put(
            f"{BASE}/{customer.id}", {"nome": other_customer.name}, format="json"
        )
        assert response.status_code == 400


class TestCustomerDelete:
    def test_delete_cascades_orders(self, customer_client, customer, flavor):
        Order.objects.create(customer=customer, flavor=flavor)

        response = customer_client.delete(f"{BASE}/{customer.id}")

        assert response.status_code == 204
        assert not Customer.objects.filter(id=customer.id).exists()
        assert not Order.objects.filter(customer_id=customer.id).exists()

    def test_deleted_customer_token_gets_404(self, customer_client, customer):
        customer_client.delete(f"{BASE}/{customer.id}")
        assert customer_client.get(f"{BASE}/{customer.id}").status_code == 404


# ===========================================================================
# Interest
# ===========================================================================


class TestInterest:
    def test_register_interest(self, customer_client, customer, flavor):
        url = f"{BASE}/{customer.id}/sabores/{flavor.id}/interesse"

        first = customer_client.post(url)
        second = customer_client.post(url)

        assert first.status_code == 201
        assert first.json()["sabor_id"] == str(flavor.id)
        assert second.status_code == 201
        assert Interest.objects.filter(customer=customer, flavor=flavor).count() == 1

    def test_unknown_flavor(self, customer_client, customer):
        response = customer_client.post(f"{BASE}/{customer.id}/sabores/{uuid4()}/interesse")
        assert response.status_code == 404
        assert response.json() == {"error": "Sabor não encontrado"}

    def test_for_another_customer(self, customer_client, other_customer, flavor):
        response = customer_client.post(
            f"{BASE}/{other_customer.id}/sabores/{flavor.id}/interesse"
        )
        assert response.status_code == 403
        assert not Interest.objects.exists()
