"""Django ORM implementation of the Flavor repository.

Look-ups return ``None`` instead of raising; ``save`` hands the events
collected on the aggregate to the event bus, delivered after commit.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.flavors.models import Flavor
from modules.flavors.repositories.interfaces import IFlavorRepository
from shared.infrastructure.bus import event_bus

logger = structlog.get_logger(__name__)


class FlavorDjangoRepository(IFlavorRepository):
    """Concrete Flavor repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Flavor]:
        try:
            return Flavor.objects.select_related("establishment").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_establishment(
        self, flavor_id: str, establishment_id: str, *, for_update: bool = False
    ) -> Optional[Flavor]:
        queryset = Flavor.objects.filter(id=flavor_id, establishment_id=establishment_id)
        if for_update:
            queryset = queryset.select_for_update()
        try:
            return queryset.first()
        except (ValueError, ValidationError):
            return None

    def get_by_name(self, establishment_id: str, name: str) -> Optional[Flavor]:
        return Flavor.objects.filter(establishment_id=establishment_id, name=name).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Flavor]:
        queryset = self.queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def queryset(self):
        return Flavor.objects.select_related("establishment").order_by("name", "id")

    def menu(self, establishment_id: Optional[str] = None) -> List[Flavor]:
        queryset = Flavor.objects.select_related("establishment")
        try:
            if establishment_id:
                queryset = queryset.filter(establishment_id=establishment_id)
            return list(queryset.order_by("-is_available", "name", "id"))
        except (ValueError, ValidationError):
            return []

    @transaction.atomic
    def save(self, entity: Flavor) -> Flavor:
        is_new = entity._state.adding
        entity.save()
        logger.info("flavor.saved", flavor_id=str(entity.id), is_new=is_new)
        event_bus.publish_on_commit(entity.pull_domain_events())
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        deleted, _ = Flavor.objects.filter(id=id).delete()
        if deleted:
            logger.info("flavor.deleted", flavor_id=str(id))
        return bool(deleted)
