"""Django ORM implementation of the Customer repositories."""

from __future__ import annotations

from typing import List, Tuple

import structlog
from django.db import transaction

from modules.core.repositories.django_repository import PrincipalDjangoRepository
from modules.customers.models import Customer, Interest
from modules.customers.repositories.interfaces import (
    ICustomerRepository,
    IInterestRepository,
)

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(PrincipalDjangoRepository[Customer], ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    model = Customer


class InterestDjangoRepository(IInterestRepository):
    @transaction.atomic
    def get_or_create(self, customer_id: str, flavor_id: str) -> Tuple[Interest, bool]:
        interest, created = Interest.objects.get_or_create(
            customer_id=customer_id, flavor_id=flavor_id
        )
        if created:
            logger.info(
                "interest.saved",
                customer_id=str(customer_id),
                flavor_id=str(flavor_id),
            )
        return interest, created

    def customer_ids_for_flavor(self, flavor_id: str) -> List[str]:
        return [
            str(customer_id)
            for customer_id in Interest.objects.filter(flavor_id=flavor_id)
            .order_by("created_at")
            .values_list("customer_id", flat=True)
        ]
