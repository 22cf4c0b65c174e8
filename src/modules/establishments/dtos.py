"""Establishment DTOs.  The secret travels as ``codigo_acesso``."""

from __future__ import annotations

from pydantic import Field

from modules.core.dtos import FrozenDTO, Name, Secret


class RegisterEstablishmentDTO(FrozenDTO):
    name: Name = Field(alias="nome")
    secret: Secret = Field(alias="codigo_acesso")


class UpdateEstablishmentDTO(FrozenDTO):
    name: Name | None = Field(default=None, alias="nome")
    secret: Secret | None = Field(default=None, alias="codigo_acesso")
