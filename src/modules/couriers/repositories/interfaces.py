"""Courier repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IPrincipalRepository

if TYPE_CHECKING:
    from modules.couriers.models import Courier


class ICourierRepository(IPrincipalRepository["Courier"]):
    """Repository contract for the Courier aggregate."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Courier]:
        """Retrieve and lock a courier row until the transaction ends."""
