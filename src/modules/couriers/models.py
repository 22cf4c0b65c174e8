"""Courier model.

Business rules implemented:
- Courier ``name`` is the login identity and must be unique.
- The secret (``senha``) is stored only as a bcrypt hash.
- A new courier starts unavailable; only available couriers are dispatched.
"""

from __future__ import annotations

from django.db import models

from modules.core.constants import Role
from modules.core.models import PrincipalModel


class Courier(PrincipalModel):
    """Courier aggregate root."""

    role = Role.COURIER

    vehicle_plate = models.CharField(max_length=10, blank=True, default="")
    vehicle_type = models.CharField(max_length=30, blank=True, default="")
    vehicle_color = models.CharField(max_length=30, blank=True, default="")
    is_available = models.BooleanField(default=False)

    class Meta:
        db_table = "couriers"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_available"], name="couriers_available_idx"),
        ]

    def set_availability(self, is_available: bool) -> bool:
        """Set the flag; returns ``True`` when the value actually changed."""
        if self.is_available == is_available:
            return False
        self.is_available = is_available
        return True
