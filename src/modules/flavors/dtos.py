"""Flavor DTOs for the Service Layer.

Wire aliases: ``nome``, ``categoria``, ``preco_medio``, ``preco_grande``,
``disponivel``.  Prices must be greater than zero.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import Field, StrictBool

from modules.core.dtos import FrozenDTO, Name


class FlavorCategoryEnum(StrEnum):
    """Framework-agnostic mirror of ``FlavorCategory``."""

    SAVORY = "salgada"
    SWEET = "doce"


class CreateFlavorDTO(FrozenDTO):
    name: Name = Field(alias="nome")
    category: FlavorCategoryEnum = Field(default=FlavorCategoryEnum.SAVORY, alias="categoria")
    price_medium: Decimal = Field(alias="preco_medio", gt=0, max_digits=8, decimal_places=2)
    price_large: Decimal = Field(alias="preco_grande", gt=0, max_digits=8, decimal_places=2)
    is_available: StrictBool = Field(default=True, alias="disponivel")


class UpdateFlavorDTO(FrozenDTO):
    """All fields are optional; only supplied fields are updated."""

    name: Name | None = Field(default=None, alias="nome")
    category: FlavorCategoryEnum | None = Field(default=None, alias="categoria")
    price_medium: Decimal | None = Field(
        default=None, alias="preco_medio", gt=0, max_digits=8, decimal_places=2
    )
    price_large: Decimal | None = Field(
        default=None, alias="preco_grande", gt=0, max_digits=8, decimal_places=2
    )
    is_available: StrictBool | None = Field(default=None, alias="disponivel")
