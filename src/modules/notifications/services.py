"""Notification service layer.

Turns domain events into stored messages for customers and
establishments, and serves each recipient its own inbox.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import IInterestRepository
    from modules.notifications.models import Notification
    from modules.notifications.repositories.interfaces import INotificationRepository

logger = structlog.get_logger(__name__)


class NotificationService:
    def __init__(
        self,
        repository: INotificationRepository,
        interest_repository: IInterestRepository | None = None,
    ) -> None:
        self._repo = repository
        self._interests = interest_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def notify_customer(self, customer_id: str, message: str) -> Notification:
        return self._repo.create_for_customer(customer_id, message)

    def notify_establishment(self, establishment_id: str, message: str) -> Notification:
        return self._repo.create_for_establishment(establishment_id, message)

    def notify_interested(self, flavor_id: str, flavor_name: str) -> int:
        """Tell every customer waiting for *flavor_id* that it is back.

        Interest is kept after notifying, so the customer hears about it
        again the next time the flavor returns.
        """
        customer_ids = self._interests.customer_ids_for_flavor(flavor_id)
        if not customer_ids:
            return 0
        count = self._repo.bulk_create_for_customers(
            customer_ids, f"O sabor {flavor_name} está disponível novamente!"
        )
        logger.info("notification.interested_notified", flavor_id=str(flavor_id), count=count)
        return count

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_for_customer(self, customer_id: str) -> List[Notification]:
        return self._repo.list_for_customer(customer_id)

    def list_for_establishment(self, establishment_id: str) -> List[Notification]:
        return self._repo.list_for_establishment(establishment_id)
