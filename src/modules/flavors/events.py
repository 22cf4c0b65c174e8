"""Flavor domain events."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from shared.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class FlavorBecameAvailable(DomainEvent):
    """Raised when a flavor goes from unavailable to available."""

    establishment_id: UUID
    flavor_name: str
