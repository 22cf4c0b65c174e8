"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  DTOs are
immutable (``frozen=True``); aliases are the wire names.

- ``CreateOrderDTO``: ``{sabor_id, quantidade, endereco_entrega, metodo_pagamento}``.
- ``UpdateStatusDTO``: ``{status}`` with one of the lifecycle values.
- ``AssignCourierDTO``: ``{entregador_id}``.
"""

from __future__ import annotations

from enum import StrEnum
from uuid import UUID

from pydantic import Field

from modules.core.dtos import FrozenDTO


class PaymentMethodEnum(StrEnum):
    """Framework-agnostic mirror of ``PaymentMethod``."""

    CASH = "dinheiro"
    CARD = "cartao"
    PIX = "pix"


class OrderStatusEnum(StrEnum):
    RECEIVED = "Pedido recebido"
    PREPARING = "Pedido em preparo"
    READY = "Pedido pronto"
    EN_ROUTE = "Pedido a caminho"
    DELIVERED = "Pedido entregue"


class CreateOrderDTO(FrozenDTO):
    """The customer id is never read from the body: it comes from the token."""

    flavor_id: UUID = Field(alias="sabor_id")
    quantity: int = Field(default=1, alias="quantidade", ge=1)
    delivery_address: str = Field(default="", alias="endereco_entrega")
    payment_method: PaymentMethodEnum = Field(
        default=PaymentMethodEnum.CASH, alias="metodo_pagamento"
    )


class UpdateStatusDTO(FrozenDTO):
    status: OrderStatusEnum


class AssignCourierDTO(FrozenDTO):
    courier_id: UUID = Field(alias="entregador_id")
