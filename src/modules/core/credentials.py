"""Credential store shared by the three principal kinds.

Persists one bcrypt-hashed secret per principal and authenticates by
``(name, plaintext secret)``.  The store never issues tokens: callers hand
the returned principal to ``modules.core.tokens.issue_token``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

import structlog
from django.contrib.auth.hashers import make_password
from django.db import transaction

from modules.core.exceptions import Conflict, Unauthorized, ValidationFailed

if TYPE_CHECKING:
    from modules.core.models import PrincipalModel
    from modules.core.repositories.interfaces import IPrincipalRepository

logger = structlog.get_logger(__name__)

P = TypeVar("P", bound="PrincipalModel")


class PrincipalAlreadyExists(Conflict):
    """A principal of the same kind already uses this name."""


class InvalidCredentials(Unauthorized):
    """Unknown name or wrong secret; both raise the same message."""


class CredentialStore(Generic[P]):
    """Register and authenticate principals of one kind.

    ``label`` is the human-readable kind ("Cliente", "Entregador", ...)
    used in error messages.
    """

    def __init__(
        self,
        repository: IPrincipalRepository[P],
        label: str,
        invalid_credentials_message: str = "Nome ou senha incorretos",
    ) -> None:
        self._repo = repository
        self._label = label
        self._invalid_message = invalid_credentials_message

    @transaction.atomic
    def register(self, name: str, secret: str, **extra_fields: Any) -> P:
        """Create a principal after enforcing name uniqueness.

        Raises:
            ValidationFailed: blank name or secret.
            PrincipalAlreadyExists: name already taken for this kind.
        """
        _require_credentials(name, secret)
        log = logger.bind(kind=self._label, name=name)

        if self._repo.get_by_name(name):
            log.warning("credentials.duplicate_name")
            raise PrincipalAlreadyExists(f"{self._label} já existe")

        principal = self._repo.build(name=name, **extra_fields)
        principal.set_secret(secret)
        principal = self._repo.save(principal)
        log.info("credentials.registered", principal_id=str(principal.id))
        return principal

    def authenticate(self, name: str, secret: str) -> P:
        """Return the principal matching *name* / *secret*.

        Raises:
            InvalidCredentials: unknown name or hash mismatch.
        """
        if not name or not secret:
            raise InvalidCredentials(self._invalid_message)

        principal = self._repo.get_by_name(name)
        if principal is None:
            # Unknown names still pay for one hash.
            make_password(secret)
            logger.info("credentials.login_failed", kind=self._label, reason="unknown")
            raise InvalidCredentials(self._invalid_message)

        if not principal.check_secret(secret):
            logger.info(
                "credentials.login_failed",
                kind=self._label,
                principal_id=str(principal.id),
                reason="mismatch",
            )
            raise InvalidCredentials(self._invalid_message)

        logger.info("credentials.login", kind=self._label, principal_id=str(principal.id))
        return principal

    def ensure_name_available(self, name: str, current_id: Any) -> None:
        """Raise if *name* belongs to a principal other than *current_id*."""
        existing = self._repo.get_by_name(name)
        if existing is not None and str(existing.id) != str(current_id):
            raise PrincipalAlreadyExists(f"{self._label} já existe")


def _require_credentials(name: str, secret: str) -> None:
    if not name or not name.strip():
        raise ValidationFailed("Nome é obrigatório")
    if not secret:
        raise ValidationFailed("Senha é obrigatória")
