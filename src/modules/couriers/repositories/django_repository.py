"""Django ORM implementation of the Courier repository."""

from __future__ import annotations

from typing import Optional

from django.core.exceptions import ValidationError

from modules.core.repositories.django_repository import PrincipalDjangoRepository
from modules.couriers.models import Courier
from modules.couriers.repositories.interfaces import ICourierRepository


class CourierDjangoRepository(PrincipalDjangoRepository[Courier], ICourierRepository):
    """Concrete Courier repository backed by Django ORM."""

    model = Courier

    def get_for_update(self, id: str) -> Optional[Courier]:
        try:
            return Courier.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None
