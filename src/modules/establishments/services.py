"""Establishment service layer (Use Cases).

Business rules enforced here:
- Establishment names are unique (``CredentialStore``).
- Approving a courier is idempotent: the association is created if
  missing and left approved if it already was.
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
    from modules.core.dtos import EstablishmentLoginDTO
    from modules.core.pagination import Page, PageRequest
    from modules.couriers.repositories.interfaces import ICourierRepository
    from modules.establishments.dtos import (
        RegisterEstablishmentDTO,
        UpdateEstablishmentDTO,
    )
    from modules.establishments.models import CourierAssociation, Establishment
    from modules.establishments.repositories.interfaces import (
        IAssociationRepository,
        IEstablishmentRepository,
    )

logger = structlog.get_logger(__name__)


class EstablishmentService:
    """Application service for Establishment use-cases."""

    def __init__(
        self,
        repository: IEstablishmentRepository,
        association_repository: IAssociationRepository | None = None,
        courier_repository: ICourierRepository | None = None,
    ) -> None:
        self._repo = repository
        self._associations = association_repository
        self._couriers = courier_repository
        self._credentials = CredentialStore(
            repository,
            "Estabelecimento",
            invalid_credentials_message="Nome ou código de acesso incorretos",
        )

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def register(self, dto: RegisterEstablishmentDTO) -> Tuple[Establishment, str]:
        establishment = self._credentials.register(dto.name, dto.secret)
        return establishment, issue_token(establishment)

    def login(self, dto: EstablishmentLoginDTO) -> Tuple[Establishment, str]:
        establishment = self._credentials.authenticate(dto.name, dto.secret)
        return establishment, issue_token(establishment)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def update_establishment(self, id: str, dto: UpdateEstablishmentDTO) -> Establishment:
        establishment = self.get_establishment(id)
        if dto.name is not None and dto.name != establishment.name:
            self._credentials.ensure_name_available(dto.name, establishment.id)
            establishment.name = dto.name
        if dto.secret is not None:
            establishment.set_secret(dto.secret)
        establishment = self._repo.save(establishment)
        logger.info("establishment.updated", establishment_id=str(id))
        return establishment

    @transaction.atomic
    def delete_establishment(self, id: str) -> None:
        """Deleting an establishment removes its flavors and their orders."""
        if not self._repo.delete(id):
            raise EstablishmentNotFound()
        logger.info("establishment.deleted", establishment_id=str(id))

    @transaction.atomic
    def approve_courier(self, establishment_id: str, courier_id: str) -> CourierAssociation:
        """Mark the courier approved for this establishment.

        Raises:
            CourierNotFound: unknown courier.
        """
        log = logger.bind(establishment_id=str(establishment_id), courier_id=str(courier_id))
        if self._couriers.get_by_id(courier_id) is None:
            raise CourierNotFound()

        association, _ = self._associations.get_or_create(courier_id, establishment_id)
        if association.approve():
            association = self._associations.save(association)
            log.info("association.approved", association_id=str(association.id))
        else:
            log.info("association.already_approved", association_id=str(association.id))
        return association

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_establishment(self, id: str) -> Establishment:
        establishment = self._repo.get_by_id(id)
        if not establishment:
            raise EstablishmentNotFound()
        return establishment

    def list_establishments(self, request: PageRequest) -> Page[Establishment]:
        return self._repo.page(request)

    def list_associations(
        self, establishment_id: str, request: PageRequest
    ) -> Page[CourierAssociation]:
        return self._associations.page_for_establishment(establishment_id, request)
