"""Customer repository interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Tuple

from modules.core.repositories.interfaces import IPrincipalRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer, Interest


class ICustomerRepository(IPrincipalRepository["Customer"]):
    """Repository contract for the Customer aggregate."""


class IInterestRepository(ABC):
    """Interest links between customers and flavors."""

    @abstractmethod
    def get_or_create(self, customer_id: str, flavor_id: str) -> Tuple[Interest, bool]:
        """Return the link for the pair, creating it when missing."""

    @abstractmethod
    def customer_ids_for_flavor(self, flavor_id: str) -> List[str]:
        """Ids of every customer waiting for *flavor_id*."""
