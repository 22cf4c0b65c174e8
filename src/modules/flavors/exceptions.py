"""Flavor domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import Conflict, NotFound, ValidationFailed


class FlavorNotFound(NotFound):
    """Unknown flavor, or a flavor owned by another establishment."""

    default_message = "Sabor não encontrado"


class FlavorAlreadyExists(Conflict):
    default_message = "Sabor já existe"


class FlavorUnavailable(ValidationFailed):
    """The flavor cannot be ordered right now."""

    default_message = "Sabor indisponível"
