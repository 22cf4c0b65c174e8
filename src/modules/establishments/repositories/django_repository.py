"""Django ORM implementation of the Establishment repositories."""

from __future__ import annotations

from typing import Optional, Tuple

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.core.pagination import Page, PageRequest, paginate
from modules.core.repositories.django_repository import PrincipalDjangoRepository
from modules.establishments.models import CourierAssociation, Establishment
from modules.establishments.repositories.interfaces import (
    IAssociationRepository,
    IEstablishmentRepository,
)

logger = structlog.get_logger(__name__)


class EstablishmentDjangoRepository(
    PrincipalDjangoRepository[Establishment], IEstablishmentRepository
):
    """Concrete Establishment repository backed by Django ORM."""

    model = Establishment


class AssociationDjangoRepository(IAssociationRepository):
    def get(
        self, courier_id: str, establishment_id: str, *, for_update: bool = False
    ) -> Optional[CourierAssociation]:
        queryset = CourierAssociation.objects.filter(
            courier_id=courier_id, establishment_id=establishment_id
        )
        if for_update:
            queryset = queryset.select_for_update()
        try:
            return queryset.first()
        except (ValueError, ValidationError):
            return None

    @transaction.atomic
    def get_or_create(
        self, courier_id: str, establishment_id: str
    ) -> Tuple[CourierAssociation, bool]:
        association, created = CourierAssociation.objects.select_for_update().get_or_create(
            courier_id=courier_id, establishment_id=establishment_id
        )
        if created:
            logger.info(
                "association.saved",
                association_id=str(association.id),
                is_new=True,
            )
        return association, created

    @transaction.atomic
    def save(self, entity: CourierAssociation) -> CourierAssociation:
        is_new = entity._state.adding
        entity.save()
        logger.info(
            "association.saved",
            association_id=str(entity.id),
            status=entity.status,
            is_new=is_new,
        )
        return entity

    def page_for_establishment(
        self, establishment_id: str, request: PageRequest
    ) -> Page[CourierAssociation]:
        queryset = (
            CourierAssociation.objects.select_related("courier")
            .filter(establishment_id=establishment_id)
            .order_by("created_at", "id")
        )
        return paginate(queryset, request)
