"""Integration tests for the notification inboxes."""

from __future__ import annotations

import pytest
from freezegun import freeze_time

from modules.notifications.models import Notification

pytestmark = pytest.mark.integration


class TestCustomerInbox:
    def test_newest_first(self, customer_client, customer):
        with freeze_time("2024-03-01 10:00"):
            Notification.objects.create(customer=customer, message="primeira")
        with freeze_time("2024-03-02 10:00"):
            Notification.objects.create(customer=customer, message="segunda")

        response = customer_client.get(f"/api/v1/clientes/{customer.id}/notificacoes")

        assert response.status_code == 200
        assert [n["mensagem"] for n in response.json()] == ["segunda", "primeira"]
        assert response.json()[0]["cliente_id"] == str(customer.id)
        assert response.json()[0]["estabelecimento_id"] is None

    def test_only_own_notifications(self, customer_client, customer, other_customer):
        Notification.objects.create(customer=other_customer, message="alheia")
        response = customer_client.get(f"/api/v1/clientes/{customer.id}/notificacoes")
        assert response.json() == []

    def test_someone_elses_inbox(self, customer_client, other_customer):
        response = customer_client.get(f"/api/v1/clientes/{other_customer.id}/notificacoes")
        assert response.status_code == 403


class TestEstablishmentInbox:
    def test_inbox(self, establishment_client, establishment):
        Notification.objects.create(establishment=establishment, message="Novo pedido")

        response = establishment_client.get(
            f"/api/v1/estabelecimentos/{establishment.id}/notificacoes"
        )

        assert response.status_code == 200
        assert [n["mensagem"] for n in response.json()] == ["Novo pedido"]

    def test_customer_cannot_read_it(self, customer_client, establishment):
        response = customer_client.get(f"/api/v1/estabelecimentos/{establishment.id}/notificacoes")
        assert response.status_code == 403


class TestSingleRecipient:
    def test_notification_needs_exactly_one_recipient(self, customer, establishment):
        from django.db import IntegrityError, transaction

        with pytest.raises(IntegrityError), transaction.atomic():
            Notification.objects.create(
                customer=customer, establishment=establishment, message="duas"
            )
        with pytest.raises(IntegrityError), transaction.atomic():
            Notification.objects.create(message="nenhuma")
