"""Establishment repository interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Tuple

from modules.core.pagination import Page, PageRequest
from modules.core.repositories.interfaces import IPrincipalRepository

if TYPE_CHECKING:
    from modules.establishments.models import CourierAssociation, Establishment


class IEstablishmentRepository(IPrincipalRepository["Establishment"]):
    """Repository contract for the Establishment aggregate."""


class IAssociationRepository(ABC):
    """Courier <-> establishment associations."""

    @abstractmethod
    def get(
        self, courier_id: str, establishment_id: str, *, for_update: bool = False
    ) -> Optional[CourierAssociation]:
        """Retrieve the association for the pair, if any."""

    @abstractmethod
    def get_or_create(
        self, courier_id: str, establishment_id: str
    ) -> Tuple[CourierAssociation, bool]:
        """Return the pair's association, creating a pending one if missing."""

    @abstractmethod
    def save(self, entity: CourierAssociation) -> CourierAssociation:
        """Persist an association."""

    @abstractmethod
    def page_for_establishment(
        self, establishment_id: str, request: PageRequest
    ) -> Page[CourierAssociation]:
        """One page of an establishment's associations, oldest first."""
