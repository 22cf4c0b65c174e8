"""Event handlers turning order and flavor events into notifications.

Handlers run after the originating transaction commits (see
``InMemoryEventBus.publish_on_commit``).
"""

from __future__ import annotations

import structlog

from modules.flavors.events import FlavorBecameAvailable
from modules.notifications.repositories.django_repository import (
    NotificationDjangoRepository,
)
from modules.notifications.services import NotificationService
from modules.orders.events import OrderCancelled, OrderCreated, OrderStatusChanged
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


def _service() -> NotificationService:
    return NotificationService(repository=NotificationDjangoRepository())


class OrderCreatedHandler(IEventHandler[OrderCreated]):
    def handle(self, event: OrderCreated) -> None:
        logger.info("notification.order_created", order_id=str(event.aggregate_id))
        _service().notify_establishment(
            str(event.establishment_id),
            f"Novo pedido {event.aggregate_id}: {event.quantity}x {event.flavor_name}",
        )


class OrderCancelledHandler(IEventHandler[OrderCancelled]):
    def handle(self, event: OrderCancelled) -> None:
        logger.info("notification.order_cancelled", order_id=str(event.aggregate_id))
        _service().notify_establishment(
            str(event.establishment_id),
            f"Pedido {event.aggregate_id} ({event.flavor_name}) foi cancelado pelo cliente",
        )


class OrderStatusChangedHandler(IEventHandler[OrderStatusChanged]):
    def handle(self, event: OrderStatusChanged) -> None:
        logger.info(
            "notification.order_status_changed",
            order_id=str(event.aggregate_id),
            new_status=event.new_status,
        )
        _service().notify_customer(
            str(event.customer_id),
            f"Seu pedido {event.aggregate_id} está com status: {event.new_status}",
        )


class FlavorBecameAvailableHandler(IEventHandler[FlavorBecameAvailable]):
    """Fans out through the ``notify_interested`` Celery task."""

    def handle(self, event: FlavorBecameAvailable) -> None:
        from modules.notifications.tasks import notify_interested

        logger.info("notification.flavor_available", flavor_id=str(event.aggregate_id))
        notify_interested.delay(str(event.aggregate_id), event.flavor_name)


order_created_handler = OrderCreatedHandler()
order_cancelled_handler = OrderCancelledHandler()
order_status_changed_handler = OrderStatusChangedHandler()
flavor_became_available_handler = FlavorBecameAvailableHandler()
