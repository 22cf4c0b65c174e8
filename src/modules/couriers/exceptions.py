"""Courier domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import NotFound, ValidationFailed


class CourierNotFound(NotFound):
    default_message = "Entregador não encontrado"


class CourierNotApproved(ValidationFailed):
    """The courier has no approved association with the establishment."""

    default_message = "Entregador não aprovado para este estabelecimento"


class CourierUnavailable(ValidationFailed):
    default_message = "Entregador indisponível"
