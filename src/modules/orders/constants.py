"""Order domain constants.

Defines the lifecycle (in order) of an order and the payment methods.
Status values are stored and returned verbatim.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    RECEIVED = "Pedido recebido", "Recebido"
    PREPARING = "Pedido em preparo", "Em preparo"
    READY = "Pedido pronto", "Pronto"
    EN_ROUTE = "Pedido a caminho", "A caminho"
    DELIVERED = "Pedido entregue", "Entregue"


class PaymentMethod(models.TextChoices):
    CASH = "dinheiro", "Dinheiro"
    CARD = "cartao", "Cartão"
    PIX = "pix", "Pix"


# Transitions only move forward along this tuple; skipping ahead is allowed.
LIFECYCLE: tuple[str, ...] = (
    OrderStatus.RECEIVED,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.EN_ROUTE,
    OrderStatus.DELIVERED,
)

STATUS_RANK: dict[str, int] = {status: rank for rank, status in enumerate(LIFECYCLE)}

CANCELLABLE_STATES: set[str] = {OrderStatus.RECEIVED, OrderStatus.PREPARING}

TERMINAL_STATES: set[str] = {OrderStatus.DELIVERED}
