"""Order repository interface.

Extends ``IRepository[Order]`` with the scoped look-ups used by the
ownership rules: an order is fetched *through* its customer, its
establishment or its courier, never by id alone on write paths.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.core.pagination import Page, PageRequest
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate."""

    @abstractmethod
    def get_for_customer(
        self, order_id: str, customer_id: str, *, for_update: bool = False
    ) -> Optional[Order]:
        """Retrieve an order only if *customer_id* placed it."""

    @abstractmethod
    def get_for_establishment(
        self, order_id: str, establishment_id: str, *, for_update: bool = False
    ) -> Optional[Order]:
        """Retrieve an order only if it is for one of *establishment_id*'s flavors."""

    @abstractmethod
    def remove_for_customer(self, order: Order, customer_id: str) -> bool:
        """Delete *order* scoped to its customer; ``False`` when nothing matched."""

    @abstractmethod
    def history_for_customer(self, customer_id: str, request: PageRequest) -> Page[Order]:
        """Customer history: undelivered first, then newest first."""

    @abstractmethod
    def page_for_establishment(self, establishment_id: str, request: PageRequest) -> Page[Order]:
        """Orders for an establishment's flavors, same ordering as the history."""

    @abstractmethod
    def page_for_courier(self, courier_id: str, request: PageRequest) -> Page[Order]:
        """Orders dispatched to a courier, same ordering as the history."""
