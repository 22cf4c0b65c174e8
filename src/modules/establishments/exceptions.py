"""Establishment domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import NotFound


class EstablishmentNotFound(NotFound):
    default_message = "Estabelecimento não encontrado"
