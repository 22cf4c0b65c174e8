"""Unit tests for BaseModel and PrincipalModel.

Exercised through ``Customer`` since the abstract bases cannot be
instantiated on their own.

Covers:
- UUIDv7 primary keys, generated before the first save.
- created_at / updated_at bookkeeping (also with ``update_fields``).
- Secret hashing: the raw value never reaches the database.
"""

from __future__ import annotations

import uuid
from datetime import timedelta

import pytest
from freezegun import freeze_time

from django.utils import timezone

from modules.customers.models import Customer

pytestmark = pytest.mark.unit


# ===========================================================================
# BaseModel
# ===========================================================================


class TestBaseModel:
    def test_primary_key_is_uuid7(self):
        customer = Customer(name="Ana")
        assert isinstance(customer.id, uuid.UUID)
        assert customer.id.version == 7

    def test_ids_are_time_ordered(self):
        first = Customer(name="Primeiro")
        second = Customer(name="Segundo")
        assert first.id < second.id

    def test_timestamps_set_on_create(self):
        with freeze_time("2024-05-01 12:00:00"):
            customer = Customer.objects.create(name="Ana", secret="x")
        assert customer.created_at == customer.updated_at
        assert customer.created_at.year == 2024

    def test_update_fields_refreshes_updated_at(self):
        with freeze_time("2024-05-01 12:00:00"):
            customer = Customer.objects.create(name="Ana", secret="x")
        with freeze_time("2024-05-01 13:00:00"):
            customer.address = "Rua Nova, 10"
            customer.save(update_fields=["address"])

        customer.refresh_from_db()
        assert customer.address == "Rua Nova, 10"
        assert customer.updated_at - customer.created_at == timedelta(hours=1)

    def test_created_at_is_not_touched_by_updates(self):
        customer = Customer.objects.create(name="Ana", secret="x")
        created = customer.created_at
        customer.name = "Ana Maria"
        customer.save()
        customer.refresh_from_db()
        assert customer.created_at == created
        assert customer.updated_at <= timezone.now()


# ===========================================================================
# PrincipalModel
# ===========================================================================


class TestPrincipalSecret:
    def test_secret_is_hashed(self):
        customer = Customer(name="Ana")
        customer.set_secret("senha123")
        assert customer.secret != "senha123"
        assert customer.secret.startswith("bcrypt")

    def test_check_secret(self):
        customer = Customer(name="Ana")
        customer.set_secret("senha123")
        assert customer.check_secret("senha123") is True
        assert customer.check_secret("errada") is False

    def test_rehashing_changes_the_hash(self):
        customer = Customer(name="Ana")
        customer.set_secret("senha123")
        first = customer.secret
        customer.set_secret("senha123")
        assert customer.secret != first

    def test_str_includes_role(self):
        assert str(Customer(name="Ana")) == "Ana (cliente)"
