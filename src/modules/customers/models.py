"""Customer and Interest models.

Business rules implemented:
- Customer ``name`` is the login identity and must be unique.
- The secret (``senha``) is stored only as a bcrypt hash.
- A customer owns its orders; orders are deleted with the customer.
- ``Interest`` records "notify me when this flavor is available"; one row
  per (customer, flavor) pair.
"""

from __future__ import annotations

from django.db import models

from modules.core.constants import Role
from modules.core.models import BaseModel, PrincipalModel


class Customer(PrincipalModel):
    """Customer aggregate root."""

    role = Role.CUSTOMER

    address = models.TextField(blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="customers_created_idx"),
        ]


class Interest(BaseModel):
    """Write-only link between a customer and a flavor it is waiting for."""

    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.CASCADE,
        related_name="interests",
    )
    flavor = models.ForeignKey(
        "flavors.Flavor",
        on_delete=models.CASCADE,
        related_name="interests",
    )

    class Meta:
        db_table = "interests"
        constraints = [
            models.UniqueConstraint(
                fields=["customer", "flavor"],
                name="interests_customer_flavor_unique",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.customer_id} -> {self.flavor_id}"
