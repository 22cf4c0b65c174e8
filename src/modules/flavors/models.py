"""Flavor (menu item) model.

Business rules implemented:
- A flavor belongs to exactly one establishment and is never reassigned.
- Flavor names are unique within an establishment.
- Both prices must be greater than zero.
- Availability is a plain flag with SET semantics; turning it on records a
  ``FlavorBecameAvailable`` event for the interest fan-out.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.flavors.constants import FlavorCategory
from modules.flavors.events import FlavorBecameAvailable
from shared.domain.events import DomainEventMixin


class Flavor(DomainEventMixin, BaseModel):
    """Flavor aggregate root."""

    establishment = models.ForeignKey(
        "establishments.Establishment",
        on_delete=models.CASCADE,
        related_name="flavors",
    )
    name = models.CharField(max_length=120)
    category = models.CharField(
        max_length=20,
        choices=FlavorCategory.choices,
        default=FlavorCategory.SAVORY,
    )
    price_medium = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    price_large = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    is_available = models.BooleanField(default=True)

    class Meta:
        db_table = "flavors"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_available", "name"], name="flavors_menu_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["establishment", "name"],
                name="flavors_establishment_name_unique",
            ),
            models.CheckConstraint(
                condition=models.Q(price_medium__gt=0),
                name="flavors_price_medium_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(price_large__gt=0),
                name="flavors_price_large_positive",
            ),
        ]

    def set_availability(self, is_available: bool) -> bool:
        """Set the flag; returns ``True`` when the value actually changed."""
        if self.is_available == is_available:
            return False
        self.is_available = is_available
        if is_available:
            self.add_domain_event(
                FlavorBecameAvailable(
                    aggregate_id=self.id,
                    establishment_id=self.establishment_id,
                    flavor_name=self.name,
                )
            )
        return True

    def __str__(self) -> str:
        return self.name
