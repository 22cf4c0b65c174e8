"""Base abstract models shared by every module.

Provides:
- ``BaseModel``: UUIDv7 primary key + created_at / updated_at timestamps.
- ``PrincipalModel``: an authenticatable actor (customer, establishment or
  courier) with a unique ``name`` and a bcrypt-hashed ``secret``.

Design decisions:
- Deletes are physical.  Cancelling an order *is* deleting it, and the
  owner-scoped ``DELETE`` endpoints return no body on success.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
- The secret is hashed through Django's password framework (see
  ``modules.core.hashers``); the raw value never reaches the database.
"""

from __future__ import annotations

from typing import ClassVar

import uuid6
from django.contrib.auth.hashers import check_password, make_password
from django.db import models

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Principals
# ---------------------------------------------------------------------------


class PrincipalModel(BaseModel):
    """Abstract authenticatable actor.

    ``name`` is the login identity and is unique per principal kind.
    Subclasses set ``role`` to one of ``modules.core.constants.Role``;
    it is embedded in every session token issued for the principal.
    """

    role: ClassVar[str]

    name = models.CharField(max_length=120, unique=True)
    secret = models.CharField(max_length=128)

    class Meta:
        abstract = True

    def set_secret(self, raw_secret: str) -> None:
        self.secret = make_password(raw_secret)

    def check_secret(self, raw_secret: str) -> bool:
        """Constant-time comparison delegated to the bcrypt hasher."""
        return check_password(raw_secret, self.secret)

    def __str__(self) -> str:
        return f"{self.name} ({self.role})"
