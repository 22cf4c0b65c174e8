"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
``modules.core.handlers.api_exception_handler`` renders them as
``{"error": ...}`` with the status carried by each base class.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound


class CustomerNotFound(NotFound):
    """The requested customer does not exist."""

    default_message = "Cliente não encontrado"
