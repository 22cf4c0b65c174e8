"""Courier service layer (Use Cases).

Business rules enforced here:
- Courier names are unique (``CredentialStore``).
- Availability uses SET semantics.
- A courier asks to work for an establishment by creating a pending
  association; the establishment approves it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import structlog
from django.db import transaction

from modules.core.credentials import CredentialStore
from modules.core.tokens import issue_token
from modules.couriers.exceptions import CourierNotFound
from modules.establishments.exceptions import EstablishmentNotFound

if TYPE_CHECKING:
    from modules.core.dtos import LoginDTO
    from modules.core.pagination import Page, PageRequest
    from modules.couriers.dtos import RegisterCourierDTO, UpdateCourierDTO
    from modules.couriers.models import Courier
    from modules.couriers.repositories.interfaces import ICourierRepository
    from modules.establishments.models import CourierAssociation
    from modules.establishments.repositories.interfaces import (
        IAssociationRepository,
        IEstablishmentRepository,
    )

logger = structlog.get_logger(__name__)

_VEHICLE_FIELDS = ("vehicle_plate", "vehicle_type", "vehicle_color")


class CourierService:
    """Application service for Courier use-cases."""

    def __init__(
        self,
        repository: ICourierRepository,
        association_repository: IAssociationRepository | None = None,
        establishment_repository: IEstablishmentRepository | None = None,
    ) -> None:
        self._repo = repository
        self._associations = association_repository
        self._establishments = establishment_repository
        self._credentials = CredentialStore(repository, "Entregador")

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def register(self, dto: RegisterCourierDTO) -> Tuple[Courier, str]:
        courier = self._credentials.register(
            dto.name,
            dto.secret,
            **{field: getattr(dto, field) for field in _VEHICLE_FIELDS},
        )
        return courier, issue_token(courier)

    def login(self, dto: LoginDTO) -> Tuple[Courier, str]:
        courier = self._credentials.authenticate(dto.name, dto.secret)
        return courier, issue_token(courier)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def update_courier(self, id: str, dto: UpdateCourierDTO) -> Courier:
        courier = self.get_courier(id)
        if dto.name is not None and dto.name != courier.name:
            self._credentials.ensure_name_available(dto.name, courier.id)
            courier.name = dto.name
        for field in _VEHICLE_FIELDS:
            value = getattr(dto, field)
            if value is not None:
                setattr(courier, field, value)
        if dto.secret is not None:
            courier.set_secret(dto.secret)
        courier = self._repo.save(courier)
        logger.info("courier.updated", courier_id=str(id))
        return courier

    @transaction.atomic
    def delete_courier(self, id: str) -> None:
        """Assigned orders keep their history with no courier."""
        if not self._repo.delete(id):
            raise CourierNotFound()
        logger.info("courier.deleted", courier_id=str(id))

    @transaction.atomic
    def set_availability(self, id: str, is_available: bool) -> Courier:
        """Set (not toggle) the availability flag."""
        courier = self._repo.get_for_update(id)
        if courier is None:
            raise CourierNotFound()
        changed = courier.set_availability(is_available)
        if changed:
            courier = self._repo.save(courier)
        logger.info(
            "courier.availability_set",
            courier_id=str(id),
            is_available=is_available,
            changed=changed,
        )
        return courier

    @transaction.atomic
    def request_association(self, courier_id: str, establishment_id: str) -> CourierAssociation:
        """Ask to deliver for an establishment.

        An existing association (pending or approved) is returned unchanged.

        Raises:
            CourierNotFound: the courier no longer exists.
            EstablishmentNotFound: unknown establishment.
        """
        self.get_courier(courier_id)
        if self._establishments.get_by_id(establishment_id) is None:
            raise EstablishmentNotFound()

        association, created = self._associations.get_or_create(courier_id, establishment_id)
        logger.info(
            "association.requested",
            courier_id=str(courier_id),
            establishment_id=str(establishment_id),
            status=association.status,
            created=created,
        )
        return association

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_courier(self, id: str) -> Courier:
        courier = self._repo.get_by_id(id)
        if not courier:
            raise CourierNotFound()
        return courier

    def list_couriers(self, request: PageRequest) -> Page[Courier]:
        return self._repo.page(request)
