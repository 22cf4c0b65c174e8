"""Establishment and CourierAssociation models.

Business rules implemented:
- Establishment ``name`` is the login identity and must be unique.
- The access code (``codigo_acesso``) is stored only as a bcrypt hash.
- One association per (courier, establishment) pair; a courier may only
  be dispatched for an establishment whose association is approved.
"""

from __future__ import annotations

from django.db import models

from modules.core.constants import Role
from modules.core.models import BaseModel, PrincipalModel
from modules.establishments.constants import AssociationStatus


class Establishment(PrincipalModel):
    """Establishment aggregate root (owns flavors and courier associations)."""

    role = Role.ESTABLISHMENT

    class Meta:
        db_table = "establishments"
        ordering = ["name"]


class CourierAssociation(BaseModel):
    courier = models.ForeignKey(
        "couriers.Courier",
        on_delete=models.CASCADE,
        related_name="associations",
    )
    establishment = models.ForeignKey(
        "establishments.Establishment",
        on_delete=models.CASCADE,
        related_name="associations",
    )
    status = models.CharField(
        max_length=20,
        choices=AssociationStatus.choices,
        default=AssociationStatus.PENDING,
    )

    class Meta:
        db_table = "courier_associations"
        constraints = [
            models.UniqueConstraint(
                fields=["courier", "establishment"],
                name="courier_associations_pair_unique",
            ),
        ]
        indexes = [
            models.Index(fields=["establishment", "status"], name="assoc_establishment_idx"),
        ]

    @property
    def is_approved(self) -> bool:
        return self.status == AssociationStatus.APPROVED

    def approve(self) -> bool:
        """Mark approved; returns ``False`` when it already was."""
        if self.is_approved:
            return False
        self.status = AssociationStatus.APPROVED
        return True

    def __str__(self) -> str:
        return f"{self.courier_id}@{self.establishment_id} ({self.status})"
