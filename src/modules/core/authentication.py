"""Bearer-token authentication backend for Django REST Framework.

Decodes the session tokens issued by ``modules.core.tokens`` and exposes
the caller as a lightweight ``Principal`` on ``request.user``.

Security decisions
------------------
* **Fail Closed**: a malformed header or an invalid / expired token is a
  401, never an anonymous request.
* No ``Authorization`` header means anonymous; the default permission
  class (``IsPrincipal``) then turns protected endpoints into 401s.
* Tokens are not looked up in the database: the signed payload is the
  source of truth for ``id`` / ``role`` / ``name``.
"""

from __future__ import annotations

import structlog
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from modules.core.tokens import InvalidOrExpiredToken, TokenPayload, verify_token

logger = structlog.get_logger(__name__)


class Principal:
    """Authenticated caller (customer, establishment or courier).

    Views read ``request.user.id`` / ``.role`` to make ownership and role
    decisions through ``modules.core.permissions``.
    """

    def __init__(self, payload: TokenPayload):
        self.payload = payload
        self.id: str = payload.id
        self.role: str = payload.role
        self.name: str = payload.name

    # DRF checks
    is_authenticated = True
    is_active = True

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.role}:{self.id}"


class PrincipalJWTAuthentication(BaseAuthentication):
    """DRF authentication class that validates ``Bearer`` session tokens."""

    keyword = "Bearer"

    # ------------------------------------------------------------------
    # Public API (DRF contract)
    # ------------------------------------------------------------------

    def authenticate(self, request):
        """Return ``(Principal, token)`` or ``None`` (no credentials)."""
        header = request.META.get("HTTP_AUTHORIZATION", "")
        if not header:
            return None

        token = self._extract_token(header)
        try:
            payload = verify_token(token)
        except InvalidOrExpiredToken as exc:
            raise AuthenticationFailed(exc.message) from exc

        principal = Principal(payload)
        structlog.contextvars.bind_contextvars(
            principal_id=principal.id, principal_role=principal.role
        )
        logger.debug("jwt_authenticated", principal_id=principal.id)
        return (principal, token)

    def authenticate_header(self, request):
        """Value for the ``WWW-Authenticate`` response header on 401."""
        return f'{self.keyword} realm="api"'

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _extract_token(self, header: str) -> str:
        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != self.keyword.lower():
            raise AuthenticationFailed("Formato do cabeçalho Authorization inválido")
        return parts[1]
