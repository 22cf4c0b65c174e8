"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  Aliases are
the wire names accepted by the API (``nome``, ``senha``, ``endereco``).
"""

from __future__ import annotations

from pydantic import Field

from modules.core.dtos import FrozenDTO, Name, Secret


class RegisterCustomerDTO(FrozenDTO):
    name: Name = Field(alias="nome")
    secret: Secret = Field(alias="senha")
    address: str = Field(default="", alias="endereco")


class UpdateCustomerDTO(FrozenDTO):
    """All fields are optional; only supplied fields are updated."""

    name: Name | None = Field(default=None, alias="nome")
    secret: Secret | None = Field(default=None, alias="senha")
    address: str | None = Field(default=None, alias="endereco")
