"""Order model and its status state machine.

Business rules implemented:
- The owning customer is set at creation and never changes.
- Status only moves forward along ``LIFECYCLE``; re-applying the current
  status is a no-op, moving backwards raises ``InvalidOrderStatus``.
- Cancellation is a deletion, allowed while received or in preparation.
- A courier is attached when the order is dispatched; deleting the
  courier keeps the order.
- Quantity is at least 1 (also enforced by a database constraint).
"""

from __future__ import annotations

import structlog
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import (
    CANCELLABLE_STATES,
    STATUS_RANK,
    TERMINAL_STATES,
    OrderStatus,
    PaymentMethod,
)
from modules.orders.events import OrderCancelled, OrderCreated, OrderStatusChanged
from modules.orders.exceptions import InvalidOrderStatus
from shared.domain.events import DomainEventMixin

logger = structlog.get_logger(__name__)


class Order(DomainEventMixin, BaseModel):
    """Order aggregate root."""

    customer: models.ForeignKey = models.ForeignKey(
        "customers.Customer",
        on_delete=models.CASCADE,
        related_name="orders",
    )
    flavor: models.ForeignKey = models.ForeignKey(
        "flavors.Flavor",
        on_delete=models.CASCADE,
        related_name="orders",
    )
    courier: models.ForeignKey = models.ForeignKey(
        "couriers.Courier",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="deliveries",
    )
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    delivery_address: models.TextField = models.TextField(blank=True, default="")
    payment_method: models.CharField = models.CharField(
        max_length=20,
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH,
    )
    status: models.CharField = models.CharField(
        max_length=30,
        choices=OrderStatus.choices,
        default=OrderStatus.RECEIVED,
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["customer", "status"], name="orders_customer_status_idx"),
            models.Index(fields=["courier", "-created_at"], name="orders_courier_created_idx"),
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="orders_quantity_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    @property
    def is_cancellable(self) -> bool:
        return self.status in CANCELLABLE_STATES

    @property
    def establishment_id(self):
        return self.flavor.establishment_id

    def can_transition_to(self, new_status: str) -> bool:
        """Forward moves and the current status itself are allowed."""
        if new_status not in STATUS_RANK:
            return False
        return STATUS_RANK[new_status] >= STATUS_RANK[self.status]

    def transition_to(self, new_status: str) -> bool:
        """Move to *new_status*; returns ``False`` when already there.

        Raises:
            InvalidOrderStatus: unknown status or a backwards move.
        """
        if not self.can_transition_to(new_status):
            raise InvalidOrderStatus(
                f"Transição de status inválida: '{self.status}' -> '{new_status}'"
            )
        if new_status == self.status:
            return False

        old_status = self.status
        self.status = new_status
        self.add_domain_event(
            OrderStatusChanged(
                aggregate_id=self.id,
                customer_id=self.customer_id,
                establishment_id=self.establishment_id,
                old_status=old_status,
                new_status=new_status,
            )
        )
        return True

    # ------------------------------------------------------------------
    # Lifecycle events
    # ------------------------------------------------------------------

    def mark_created(self) -> None:
        self.add_domain_event(
            OrderCreated(
                aggregate_id=self.id,
                customer_id=self.customer_id,
                establishment_id=self.establishment_id,
                flavor_name=self.flavor.name,
                quantity=self.quantity,
            )
        )

    def mark_cancelled(self) -> None:
        self.add_domain_event(
            OrderCancelled(
                aggregate_id=self.id,
                customer_id=self.customer_id,
                establishment_id=self.establishment_id,
                flavor_name=self.flavor.name,
            )
        )

    def __str__(self) -> str:
        return f"{self.id} ({self.status})"
