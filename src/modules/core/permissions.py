"""Access control guard.

Two checks, both applied by views *before* any service call so that a
denied request never touches the data store:

- ``require_self``: the caller's id must equal the resource owner id,
  compared as UUIDs so letter case does not matter.
- ``require_role``: the caller's role must be one of the allowed roles.

Both raise ``Forbidden`` (403).  Existence is not hidden: a caller asking
for somebody else's id gets 403 whether or not that id exists.
"""

from __future__ import annotations

from typing import Any, Iterable
from uuid import UUID

import structlog
from rest_framework.permissions import BasePermission

from modules.core.authentication import Principal
from modules.core.exceptions import Forbidden

logger = structlog.get_logger(__name__)


class IsPrincipal(BasePermission):
    """Default permission: a valid session token is required."""

    def has_permission(self, request, view) -> bool:
        return isinstance(request.user, Principal)


def require_role(principal: Principal, allowed_roles: Iterable[str]) -> None:
    allowed = {str(role) for role in allowed_roles}
    if principal.role not in allowed:
        logger.warning(
            "access.role_denied",
            principal_id=principal.id,
            role=principal.role,
            allowed=sorted(allowed),
        )
        raise Forbidden()


def require_self(principal: Principal, resource_owner_id: Any) -> None:
    if _normalize_id(principal.id) != _normalize_id(resource_owner_id):
        logger.warning(
            "access.owner_denied",
            principal_id=principal.id,
            resource_owner_id=str(resource_owner_id),
        )
        raise Forbidden()


def _normalize_id(value: Any) -> str:
    """Canonical lowercase hyphenated form; non-UUID values compare as given."""
    try:
        return str(value if isinstance(value, UUID) else UUID(str(value)))
    except ValueError:
        return str(value)


def require_principal(principal: Principal, role: str, resource_owner_id: Any) -> None:
    """Shortcut for the common "this role, acting on itself" check."""
    require_role(principal, [role])
    require_self(principal, resource_owner_id)
