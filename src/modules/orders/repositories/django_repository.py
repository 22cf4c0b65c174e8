"""Django ORM implementation of the Order repository.

Concurrency control on status updates uses ``select_for_update()`` on
the scoped look-ups.  ``save`` and ``remove_for_customer`` hand the
events collected on the aggregate to the event bus, which delivers them
once the surrounding transaction commits.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.core.pagination import Page, PageRequest, paginate
from modules.orders.constants import STATUS_RANK
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository
from shared.infrastructure.bus import event_bus

logger = structlog.get_logger(__name__)

_STATUS_RANK_EXPRESSION = models.Case(
    *[models.When(status=status, then=models.Value(rank)) for status, rank in STATUS_RANK.items()],
    default=models.Value(len(STATUS_RANK)),
    output_field=models.IntegerField(),
)


def _base_queryset() -> models.QuerySet[Order]:
    return Order.objects.select_related("customer", "flavor", "flavor__establishment", "courier")


def _by_lifecycle(queryset: models.QuerySet[Order]) -> models.QuerySet[Order]:
    """Undelivered first (lifecycle rank ascending), newest first within a rank."""
    return queryset.annotate(status_rank=_STATUS_RANK_EXPRESSION).order_by(
        "status_rank", "-created_at", "-id"
    )


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Returns ``None`` for non-existent or invalid IDs."""
        try:
            return _base_queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_customer(
        self, order_id: str, customer_id: str, *, for_update: bool = False
    ) -> Optional[Order]:
        return self._scoped(for_update, id=order_id, customer_id=customer_id)

    def get_for_establishment(
        self, order_id: str, establishment_id: str, *, for_update: bool = False
    ) -> Optional[Order]:
        return self._scoped(
            for_update, id=order_id, flavor__establishment_id=establishment_id
        )

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        queryset = _base_queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def history_for_customer(self, customer_id: str, request: PageRequest) -> Page[Order]:
        return paginate(_by_lifecycle(_base_queryset().filter(customer_id=customer_id)), request)

    def page_for_establishment(self, establishment_id: str, request: PageRequest) -> Page[Order]:
        queryset = _base_queryset().filter(flavor__establishment_id=establishment_id)
        return paginate(_by_lifecycle(queryset), request)

    def page_for_courier(self, courier_id: str, request: PageRequest) -> Page[Order]:
        return paginate(_by_lifecycle(_base_queryset().filter(courier_id=courier_id)), request)

    # ------------------------------------------------------------------
    # Save / Delete (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist an order and schedule its pending events."""
        is_new = entity._state.adding
        entity.save()
        events = entity.pull_domain_events()
        event_bus.publish_on_commit(events)
        logger.info(
            "order.saved",
            order_id=str(entity.id),
            is_new=is_new,
            event_count=len(events),
        )
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        deleted, _ = Order.objects.filter(id=id).delete()
        if deleted:
            logger.info("order.deleted", order_id=str(id))
        return bool(deleted)

    @transaction.atomic
    def remove_for_customer(self, order: Order, customer_id: str) -> bool:
        deleted, _ = Order.objects.filter(id=order.id, customer_id=customer_id).delete()
        events = order.pull_domain_events()
        if not deleted:
            return False
        event_bus.publish_on_commit(events)
        logger.info("order.deleted", order_id=str(order.id), event_count=len(events))
        return True

    # ------------------------------------------------------------------

    def _scoped(self, for_update: bool, **lookups: Any) -> Optional[Order]:
        queryset = _base_queryset()
        if for_update:
            # Lock only the order row: nullable joins cannot be locked on PostgreSQL.
            queryset = queryset.select_for_update(of=("self",))
        try:
            return queryset.filter(**lookups).first()
        except (ValueError, ValidationError):
            return None
