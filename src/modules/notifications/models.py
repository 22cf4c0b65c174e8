"""Notification model.

A notification targets exactly one recipient: a customer or an
establishment.  The database enforces it with a check constraint.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Notification(BaseModel):
    message = models.TextField()
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="notifications",
    )
    establishment = models.ForeignKey(
        "establishments.Establishment",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="notifications",
    )

    class Meta:
        db_table = "notifications"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["customer", "-created_at"], name="notif_customer_idx"),
            models.Index(fields=["establishment", "-created_at"], name="notif_establishment_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(customer__isnull=False, establishment__isnull=True)
                    | models.Q(customer__isnull=True, establishment__isnull=False)
                ),
                name="notifications_single_recipient",
            ),
        ]

    def __str__(self) -> str:
        return self.message[:50]
