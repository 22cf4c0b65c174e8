"""DRF exception handler producing the flat ``{"error": ...}`` envelope.

Must not be imported by ``modules.core.exceptions``: importing
``rest_framework.views`` loads the authentication classes, which import
the domain exceptions.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.db import DatabaseError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import DomainError, InternalError

logger = structlog.get_logger(__name__)


def error_response(message: str, status_code: int) -> Response:
    return Response({"error": message}, status=status_code)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Render every failure with the flat ``{"error": ...}`` envelope.

    ``DatabaseError`` is logged with its traceback and answered as
    ``InternalError``.
    """
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, DatabaseError):
        logger.exception("api.persistence_failure", view=view_name)
        exc = InternalError()

    if isinstance(exc, DomainError):
        log = logger.bind(view=view_name, status_code=exc.status_code)
        if exc.status_code >= 500:
            log.error("api.domain_error", error=exc.message)
        else:
            log.info("api.domain_error", error=exc.message)
        return error_response(exc.message, exc.status_code)

    response = exception_handler(exc, context)
    if response is None:
        return None

    response.data = {"error": _flatten_detail(response.data)}
    return response


def _flatten_detail(data: Any) -> str:
    if isinstance(data, dict):
        if "detail" in data and len(data) == 1:
            return _flatten_detail(data["detail"])
        return "; ".join(
            f"{field}: {_flatten_detail(value)}" for field, value in data.items()
        )
    if isinstance(data, (list, tuple)):
        return " ".join(_flatten_detail(item) for item in data)
    return str(data)
