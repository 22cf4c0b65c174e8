"""Flavor service layer (Use Cases).

Business rules enforced here:
- Only the owning establishment writes to a flavor; a flavor owned by
  somebody else is reported as not found.
- Flavor names are unique within an establishment.
- Availability uses SET semantics: writing the current value is a no-op.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.establishments.exceptions import EstablishmentNotFound
from modules.flavors.exceptions import FlavorAlreadyExists, FlavorNotFound
from modules.flavors.models import Flavor

if TYPE_CHECKING:
    from modules.establishments.repositories.interfaces import IEstablishmentRepository
    from modules.flavors.dtos import CreateFlavorDTO, UpdateFlavorDTO
    from modules.flavors.repositories.interfaces import IFlavorRepository

logger = structlog.get_logger(__name__)


class FlavorService:
    """Application service for Flavor use-cases."""

    def __init__(
        self,
        repository: IFlavorRepository,
        establishment_repository: IEstablishmentRepository | None = None,
    ) -> None:
        self._repo = repository
        self._establishments = establishment_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_flavor(self, establishment_id: str, dto: CreateFlavorDTO) -> Flavor:
        """Add a flavor to an establishment's menu.

        Raises:
            EstablishmentNotFound: the establishment no longer exists.
            FlavorAlreadyExists: the establishment already has this name.
        """
        log = logger.bind(establishment_id=str(establishment_id), name=dto.name)

        establishment = self._establishments.get_by_id(establishment_id)
        if establishment is None:
            raise EstablishmentNotFound()

        if self._repo.get_by_name(establishment_id, dto.name):
            log.warning("flavor.duplicate_name")
            raise FlavorAlreadyExists()

        flavor = Flavor(
            establishment=establishment,
            name=dto.name,
            category=dto.category.value,
            price_medium=dto.price_medium,
            price_large=dto.price_large,
            is_available=dto.is_available,
        )
        flavor = self._repo.save(flavor)
        log.info("flavor.created", flavor_id=str(flavor.id))
        return flavor

    @transaction.atomic
    def update_flavor(self, establishment_id: str, flavor_id: str, dto: UpdateFlavorDTO) -> Flavor:
        """Raises ``FlavorNotFound`` / ``FlavorAlreadyExists``."""
        flavor = self._owned(flavor_id, establishment_id)

        if dto.name is not None and dto.name != flavor.name:
            if self._repo.get_by_name(establishment_id, dto.name):
                raise FlavorAlreadyExists()
            flavor.name = dto.name
        if dto.category is not None:
            flavor.category = dto.category.value
        if dto.price_medium is not None:
            flavor.price_medium = dto.price_medium
        if dto.price_large is not None:
            flavor.price_large = dto.price_large
        if dto.is_available is not None:
            flavor.set_availability(dto.is_available)

        flavor = self._repo.save(flavor)
        logger.info("flavor.updated", flavor_id=str(flavor_id))
        return flavor

    @transaction.atomic
    def delete_flavor(self, establishment_id: str, flavor_id: str) -> None:
        self._owned(flavor_id, establishment_id)
        self._repo.delete(flavor_id)
        logger.info("flavor.removed", flavor_id=str(flavor_id))

    @transaction.atomic
    def set_flavor_availability(
        self, establishment_id: str, flavor_id: str, is_available: bool
    ) -> Flavor:
        """Set (not toggle) the availability flag.

        Ownership is left untouched.  Becoming available emits
        ``FlavorBecameAvailable`` once the transaction commits.

        Raises:
            FlavorNotFound: unknown flavor or owned by another establishment.
        """
        flavor = self._owned(flavor_id, establishment_id, for_update=True)
        changed = flavor.set_availability(is_available)
        if changed:
            flavor = self._repo.save(flavor)
        logger.info(
            "flavor.availability_set",
            flavor_id=str(flavor_id),
            is_available=is_available,
            changed=changed,
        )
        return flavor

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_flavor(self, flavor_id: str) -> Flavor:
        flavor = self._repo.get_by_id(flavor_id)
        if flavor is None:
            raise FlavorNotFound()
        return flavor

    def list_flavors(self):
        """Base queryset, narrowed by ``FlavorFilter`` in the view."""
        return self._repo.queryset()

    def menu(self, establishment_id: Optional[str] = None) -> List[Flavor]:
        return self._repo.menu(establishment_id)

    # ------------------------------------------------------------------

    def _owned(self, flavor_id: str, establishment_id: str, *, for_update: bool = False) -> Flavor:
        flavor = self._repo.get_for_establishment(
            flavor_id, establishment_id, for_update=for_update
        )
        if flavor is None:
            logger.info(
                "flavor.not_found",
                flavor_id=str(flavor_id),
                establishment_id=str(establishment_id),
            )
            raise FlavorNotFound()
        return flavor
