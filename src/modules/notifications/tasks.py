"""Tasks assíncronas do módulo de notificações."""

import structlog
from celery import shared_task

from modules.customers.repositories.django_repository import InterestDjangoRepository
from modules.notifications.repositories.django_repository import (
    NotificationDjangoRepository,
)
from modules.notifications.services import NotificationService

logger = structlog.get_logger(__name__)


@shared_task(name="notifications.notify_interested")
def notify_interested(flavor_id: str, flavor_name: str) -> dict:
    """Notifica os clientes interessados em um sabor que voltou ao cardápio."""
    service = NotificationService(
        repository=NotificationDjangoRepository(),
        interest_repository=InterestDjangoRepository(),
    )
    count = service.notify_interested(flavor_id, flavor_name)
    logger.info("notify_interested.executed", flavor_id=flavor_id, count=count)
    return {"flavor_id": flavor_id, "notified": count}
