"""Order domain exceptions.

Raised by the Service Layer when business rules are violated and
rendered by ``modules.core.handlers.api_exception_handler``.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound, ValidationFailed


class OrderNotFound(NotFound):
    """The order does not exist or is not visible to the caller."""

    default_message = "Pedido não encontrado"


class InvalidOrderStatus(ValidationFailed):
    """Unknown status, or a transition moving backwards."""

    default_message = "Transição de status inválida"


class OrderNotCancellable(ValidationFailed):
    """Orders can only be cancelled while received or in preparation."""

    default_message = "Pedido não pode mais ser cancelado"
