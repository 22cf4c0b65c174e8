"""Project-wide error taxonomy.

Every module raises subclasses of ``DomainError`` from its Service Layer.
Each class carries the HTTP status it maps to, so the API layer never has
to repeat the translation table:

===================  ======  ==============================================
Class                Status  Meaning
===================  ======  ==============================================
``ValidationFailed``  400    missing / invalid required fields
``Conflict``          400    duplicate identity name (kept at 400, not 409)
``Unauthorized``      401    bad credentials, missing or invalid token
``Forbidden``         403    authenticated but not the owner / wrong role
``NotFound``          404    resource absent (or not owned, when scoped)
``InternalError``     500    catch-all, including persistence failures
===================  ======  ==============================================

The wire envelope is always ``{"error": "<human readable message>"}``,
rendered by ``modules.core.handlers.api_exception_handler``.
"""

from __future__ import annotations

from rest_framework import status

from modules.core.constants import INTERNAL_ERROR_MESSAGE


class DomainError(Exception):
    """Base class for errors raised by the Service Layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Dados inválidos"


class Conflict(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Registro já existe"


class Unauthorized(DomainError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Credenciais inválidas"


class Forbidden(DomainError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Acesso negado"


class NotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Registro não encontrado"


class InternalError(DomainError):
    """Unexpected failure; the message never carries details."""
