"""Django ORM implementation of the Notification repository."""

from __future__ import annotations

from typing import Iterable, List

import structlog
from django.db import transaction

from modules.notifications.models import Notification
from modules.notifications.repositories.interfaces import INotificationRepository

logger = structlog.get_logger(__name__)


class NotificationDjangoRepository(INotificationRepository):
    @transaction.atomic
    def create_for_customer(self, customer_id: str, message: str) -> Notification:
        notification = Notification.objects.create(customer_id=customer_id, message=message)
        logger.info(
            "notification.saved",
            notification_id=str(notification.id),
            customer_id=str(customer_id),
        )
        return notification

    @transaction.atomic
    def create_for_establishment(self, establishment_id: str, message: str) -> Notification:
        notification = Notification.objects.create(
            establishment_id=establishment_id, message=message
        )
        logger.info(
            "notification.saved",
            notification_id=str(notification.id),
            establishment_id=str(establishment_id),
        )
        return notification

    @transaction.atomic
    def bulk_create_for_customers(self, customer_ids: Iterable[str], message: str) -> int:
        created = Notification.objects.bulk_create(
            [Notification(customer_id=customer_id, message=message) for customer_id in customer_ids]
        )
        logger.info("notification.bulk_saved", count=len(created))
        return len(created)

    def list_for_customer(self, customer_id: str) -> List[Notification]:
        return list(Notification.objects.filter(customer_id=customer_id).order_by("-created_at", "-id"))

    def list_for_establishment(self, establishment_id: str) -> List[Notification]:
        return list(
            Notification.objects.filter(establishment_id=establishment_id).order_by(
                "-created_at", "-id"
            )
        )
