"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from shared.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderCreated(DomainEvent):
    """Raised when an order is created."""

    customer_id: UUID
    establishment_id: UUID
    flavor_name: str
    quantity: int


@dataclass(frozen=True, kw_only=True)
class OrderCancelled(DomainEvent):
    """Raised when an order is cancelled (deleted) by its customer."""

    customer_id: UUID
    establishment_id: UUID
    flavor_name: str


@dataclass(frozen=True, kw_only=True)
class OrderStatusChanged(DomainEvent):
    """Raised when an order status changes."""

    customer_id: UUID
    establishment_id: UUID
    old_status: str
    new_status: str
