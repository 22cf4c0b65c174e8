"""DTO building blocks shared by every module.

DTOs are Pydantic v2 models, immutable (``frozen=True``), whose field
aliases are the Portuguese wire names (``nome``, ``senha``, ...).  Python
code constructs them by field name (``populate_by_name``); views validate
raw request bodies through ``parse_dto`` so a malformed payload becomes a
400 ``ValidationFailed`` rather than a 500.
"""

from __future__ import annotations

from typing import Annotated, Any, TypeVar

from django.http import QueryDict
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StringConstraints
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import ValidationFailed

D = TypeVar("D", bound=BaseModel)

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
Secret = Annotated[str, StringConstraints(min_length=1, max_length=128)]
# Stripped like ``Name``; blank login names fail as bad credentials (401).
LoginName = Annotated[str, StringConstraints(strip_whitespace=True)]


class FrozenDTO(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class LoginDTO(FrozenDTO):
    """``{nome, senha}`` for customers and couriers."""

    name: LoginName = Field(default="", alias="nome")
    secret: str = Field(default="", alias="senha")


class EstablishmentLoginDTO(LoginDTO):
    secret: str = Field(default="", alias="codigo_acesso")


def parse_dto(dto_class: type[D], data: Any) -> D:
    """Validate a request body into *dto_class*.

    Raises:
        ValidationFailed: listing the offending wire field names.
    """
    if isinstance(data, QueryDict):
        data = data.dict()
    try:
        return dto_class.model_validate(data)
    except PydanticValidationError as exc:
        fields = sorted(
            {".".join(str(part) for part in error["loc"]) or "corpo" for error in exc.errors()}
        )
        raise ValidationFailed(f"Dados inválidos: {', '.join(fields)}") from exc


class AvailabilityDTO(FrozenDTO):
    """``{disponivel: bool}``; strings such as ``"true"`` are rejected."""

    is_available: StrictBool = Field(alias="disponivel")
