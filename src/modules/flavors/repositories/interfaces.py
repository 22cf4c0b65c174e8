"""Flavor repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.flavors.models import Flavor


class IFlavorRepository(IRepository["Flavor"]):
    """Repository contract for the Flavor aggregate."""

    @abstractmethod
    def get_for_establishment(
        self, flavor_id: str, establishment_id: str, *, for_update: bool = False
    ) -> Optional[Flavor]:
        """Retrieve a flavor only if *establishment_id* owns it."""

    @abstractmethod
    def get_by_name(self, establishment_id: str, name: str) -> Optional[Flavor]:
        """Retrieve an establishment's flavor by name."""

    @abstractmethod
    def queryset(self) -> QuerySet[Flavor]:
        """Base queryset for filtered listings."""

    @abstractmethod
    def menu(self, establishment_id: Optional[str] = None) -> List[Flavor]:
        """Flavors ordered available-first, then by name."""
