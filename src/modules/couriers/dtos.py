"""Courier DTOs.

Wire aliases: ``nome``, ``senha``, ``placa_veiculo``, ``tipo_veiculo``,
``cor_veiculo``.
"""

from __future__ import annotations

from pydantic import Field

from modules.core.dtos import FrozenDTO, Name, Secret


class RegisterCourierDTO(FrozenDTO):
    name: Name = Field(alias="nome")
    secret: Secret = Field(alias="senha")
    vehicle_plate: str = Field(default="", alias="placa_veiculo", max_length=10)
    vehicle_type: str = Field(default="", alias="tipo_veiculo", max_length=30)
    vehicle_color: str = Field(default="", alias="cor_veiculo", max_length=30)


class UpdateCourierDTO(FrozenDTO):
    """All fields are optional; only supplied fields are updated."""

    name: Name | None = Field(default=None, alias="nome")
    secret: Secret | None = Field(default=None, alias="senha")
    vehicle_plate: str | None = Field(default=None, alias="placa_veiculo", max_length=10)
    vehicle_type: str | None = Field(default=None, alias="tipo_veiculo", max_length=30)
    vehicle_color: str | None = Field(default=None, alias="cor_veiculo", max_length=30)
