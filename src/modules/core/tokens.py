"""Session token issuance and verification.

Tokens are HS256 JWTs (PyJWT) carrying ``{id, role, name}`` plus ``iat`` /
``exp``.  They live for ``JWT_ACCESS_TOKEN_LIFETIME`` (one hour by default).

Security decisions
------------------
* The signing key comes from ``JWT_SIGNING_KEY`` and falls back to
  ``SECRET_KEY``, which has no default: there is no literal fallback key.
* ``algorithms`` is pinned to the configured value, never read from the
  incoming token header.
* Any decode failure, a missing claim or an unknown role is reported as
  ``InvalidOrExpiredToken``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Protocol

import jwt as pyjwt
import structlog
from django.conf import settings
from jwt.exceptions import ExpiredSignatureError, PyJWTError

from modules.core.constants import Role
from modules.core.exceptions import Unauthorized

logger = structlog.get_logger(__name__)

REQUIRED_CLAIMS = ("id", "role", "name", "exp")


class InvalidOrExpiredToken(Unauthorized):
    default_message = "Token inválido ou expirado"


class TokenSubject(Protocol):
    id: Any
    name: str
    role: str


@dataclass(frozen=True)
class TokenPayload:
    id: str
    role: str
    name: str


def issue_token(principal: TokenSubject, *, now: datetime | None = None) -> str:
    """Sign a session token for *principal*."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "id": str(principal.id),
        "role": str(principal.role),
        "name": principal.name,
        "iat": issued_at,
        "exp": issued_at + settings.JWT_ACCESS_TOKEN_LIFETIME,
    }
    token = pyjwt.encode(
        claims, settings.JWT_SIGNING_KEY, algorithm=settings.JWT_ALGORITHM
    )
    logger.info("token.issued", principal_id=claims["id"], role=claims["role"])
    return token


def verify_token(token: str) -> TokenPayload:
    """Decode *token* and return its payload.

    Raises:
        InvalidOrExpiredToken: bad signature, malformed token, expired,
            missing claims or unknown role.
    """
    try:
        claims = pyjwt.decode(
            token,
            settings.JWT_SIGNING_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": list(REQUIRED_CLAIMS)},
        )
    except ExpiredSignatureError as exc:
        logger.info("token.expired")
        raise InvalidOrExpiredToken("Token expirado") from exc
    except PyJWTError as exc:
        logger.warning("token.validation_failed", error=str(exc))
        raise InvalidOrExpiredToken() from exc

    if claims["role"] not in Role.values:
        logger.warning("token.unknown_role", role=claims["role"])
        raise InvalidOrExpiredToken()

    return TokenPayload(
        id=str(claims["id"]),
        role=claims["role"],
        name=str(claims["name"]),
    )
