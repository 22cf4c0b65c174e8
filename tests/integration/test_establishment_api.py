"""Integration tests for Establishment and Courier API endpoints.

Covers:
- register / login with ``codigo_acesso`` (establishments) and ``senha``
  (couriers).
- Paginated listings open to any principal.
- Courier availability (SET semantics).
- Association request and idempotent approval.
"""

from __future__ import annotations

from uuid import uuid4

import pytest

from modules.couriers.models import Courier
from modules.establishments.constants import AssociationStatus
from modules.establishments.models import CourierAssociation, Establishment

pytestmark = pytest.mark.integration

ESTABLISHMENTS = "/api/v1/estabelecimentos"
COURIERS = "/api/v1/entregadores"


# ===========================================================================
# Establishments
# ===========================================================================


class TestEstablishmentSession:
    def test_register(self, api_client):
        response = api_client.post(
            f"{ESTABLISHMENTS}/register",
            {"nome": "Pizzaria Bella", "codigo_acesso": "654321"},
            format="json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["estabelecimento"]["nome"] == "Pizzaria Bella"
        assert data["token"]
        assert Establishment.objects.get(name="Pizzaria Bella").secret != "654321"

    def test_register_requires_access_code(self, api_client):
        response = api_client.post(
            f"{ESTABLISHMENTS}/register", {"nome": "Pizzaria Bella"}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Dados inválidos: codigo_acesso"}

    def test_login(self, api_client, establishment):
        response = api_client.post(
            f"{ESTABLISHMENTS}/login",
            {"nome": establishment.name, "codigo_acesso": "123456"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["estabelecimento"]["id"] == str(establishment.id)

    def test_login_wrong_code(self, api_client, establishment):
        response = api_client.post(
            f"{ESTABLISHMENTS}/login",
            {"nome": establishment.name, "codigo_acesso": "000000"},
            format="json",
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Nome ou código de acesso incorretos"}

    def test_customer_and_establishment_names_are_separate(self, api_client, customer):
        response = api_client.post(
            f"{ESTABLISHMENTS}/register",
            {"nome": customer.name, "codigo_acesso": "111111"},
            format="json",
        )
        assert response.status_code == 201


class TestEstablishmentResource:
    def test_list_is_paginated(self, customer_client, establishment_factory):
        for i in range(12):
            establishment_factory(name=f"Pizzaria {i:02d}")

        response = customer_client.get(ESTABLISHMENTS, {"page": 2, "limit": 5})

        assert response.status_code == 200
        body = response.json()
        assert body["meta"] == {"total": 12, "page": 2, "pages": 3}
        assert len(body["data"]) == 5

    def test_list_requires_token(self, api_client):
        assert api_client.get(ESTABLISHMENTS).status_code == 401

    def test_retrieve_self(self, establishment_client, establishment):
        response = establishment_client.get(f"{ESTABLISHMENTS}/{establishment.id}")
        assert response.status_code == 200
        assert response.json()["nome"] == establishment.name

    def test_retrieve_other(self, establishment_client, establishment_factory):
        other = establishment_factory(name="Outra")
        assert establishment_client.get(f"{ESTABLISHMENTS}/{other.id}").status_code == 403

    def test_update_access_code(self, establishment_client, establishment, api_client):
        response = establishment_client.put(
            f"{ESTABLISHMENTS}/{establishment.id}", {"codigo_acesso": "999999"}, format="json"
        )
        assert response.status_code == 200

        login = api_client.post(
            f"{ESTABLISHMENTS}/login",
            {"nome": establishment.name, "codigo_acesso": "999999"},
            format="json",
        )
        assert login.status_code == 200

    def test_delete_cascades_flavors(self, establishment_client, establishment, flavor):
        response = establishment_client.delete(f"{ESTABLISHMENTS}/{establishment.id}")

        assert response.status_code == 204
        assert not establishment.flavors.exists()


# ===========================================================================
# Couriers
# ===========================================================================


class TestCourierSession:
    def test_register(self, api_client):
        response = api_client.post(
            f"{COURIERS}/register",
            {
                "nome": "Dani",
                "senha": "senha123",
                "placa_veiculo": "XYZ9A87",
                "tipo_veiculo": "bicicleta",
                "cor_veiculo": "verde",
            },
            format="json",
        )

        assert response.status_code == 201
        courier = response.json()["entregador"]
        assert courier["placa_veiculo"] == "XYZ9A87"
        assert courier["disponivel"] is False

    def test_login(self, api_client, courier):
        response = api_client.post(
            f"{COURIERS}/login", {"nome": courier.name, "senha": "senha123"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["entregador"]["id"] == str(courier.id)


class TestCourierResource:
    def test_list(self, establishment_client, courier):
        response = establishment_client.get(COURIERS)
        assert response.status_code == 200
        assert [c["id"] for c in response.json()["data"]] == [str(courier.id)]

    def test_availability_set_twice_stays_true(self, courier_factory, auth):
        courier = courier_factory(name="Dani", is_available=False)
        client = auth(courier)
        url = f"{COURIERS}/{courier.id}/disponibilidade"

        first = client.put(url, {"disponivel": True}, format="json")
        second = client.put(url, {"disponivel": True}, format="json")

        assert first.json()["disponivel"] is True
        assert second.json()["disponivel"] is True
        courier.refresh_from_db()
        assert courier.is_available is True

    def test_availability_rejects_strings(self, courier_client, courier):
        response = courier_client.put(
            f"{COURIERS}/{courier.id}/disponibilidade", {"disponivel": "true"}, format="json"
        )
        assert response.status_code == 400

    def test_availability_of_another_courier(self, courier_client, courier_factory):
        other = courier_factory(name="Eva", is_available=False)
        response = courier_client.put(
            f"{COURIERS}/{other.id}/disponibilidade", {"disponivel": True}, format="json"
        )
        assert response.status_code == 403
        other.refresh_from_db()
        assert other.is_available is False

    def test_update_vehicle(self, courier_client, courier):
        response = courier_client.put(
            f"{COURIERS}/{courier.id}", {"cor_veiculo": "azul"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["cor_veiculo"] == "azul"

    def test_delete(self, courier_client, courier):
        assert courier_client.delete(f"{COURIERS}/{courier.id}").status_code == 204
        assert not Courier.objects.filter(id=courier.id).exists()


# ===========================================================================
# Associations
# ===========================================================================


class TestAssociations:
    def test_request_then_approve(self, courier_client, establishment_client, courier, establishment):
        request = courier_client.post(
            f"{COURIERS}/{courier.id}/estabelecimentos/{establishment.id}/associacao"
        )
        assert request.status_code == 201
        assert request.json()["status"] == AssociationStatus.PENDING
        assert request.json()["aprovado"] is False

        listing = establishment_client.get(f"{ESTABLISHMENTS}/{establishment.id}/entregadores")
        assert listing.json()["meta"]["total"] == 1

        approve_url = f"{ESTABLISHMENTS}/{establishment.id}/entregadores/{courier.id}/aprovar"
        first = establishment_client.post(approve_url)
        second = establishment_client.post(approve_url)

        assert first.status_code == 200
        assert first.json()["aprovado"] is True
        assert second.json() == first.json()
        assert CourierAssociation.objects.filter(courier=courier).count() == 1

    def test_request_is_idempotent(self, courier_client, courier, establishment):
        url = f"{COURIERS}/{courier.id}/estabelecimentos/{establishment.id}/associacao"
        courier_client.post(url)
        courier_client.post(url)
        assert CourierAssociation.objects.filter(courier=courier).count() == 1

    def test_request_unknown_establishment(self, courier_client, courier):
        response = courier_client.post(
            f"{COURIERS}/{courier.id}/estabelecimentos/{uuid4()}/associacao"
        )
        assert response.status_code == 404

    def test_approve_without_request(self, establishment_client, establishment, courier):
        response = establishment_client.post(
            f"{ESTABLISHMENTS}/{establishment.id}/entregadores/{courier.id}/aprovar"
        )
        assert response.status_code == 200
        assert CourierAssociation.objects.get(courier=courier).is_approved

    def test_approve_unknown_courier(self, establishment_client, establishment):
        response = establishment_client.post(
            f"{ESTABLISHMENTS}/{establishment.id}/entregadores/{uuid4()}/aprovar"
        )
        assert response.status_code == 404

    def test_only_the_establishment_approves(self, courier_client, establishment, courier):
        response = courier_client.post(
            f"{ESTABLISHMENTS}/{establishment.id}/entregadores/{courier.id}/aprovar"
        )
        assert response.status_code == 403
        assert not CourierAssociation.objects.exists()
