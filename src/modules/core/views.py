import time
from typing import Any, Callable, Dict

import structlog
from django.core.cache import cache
from django.db import connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.constants import INTERNAL_ERROR_MESSAGE

logger = structlog.get_logger(__name__)


def _check_database() -> None:
    conn = connections["default"]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()


def _check_cache() -> None:
    cache.set("_health_check", "ok", 10)
    if cache.get("_health_check") != "ok":
        raise ConnectionError("Cache read failed")


def _probe(name: str, check: Callable[[], None]) -> Dict[str, Any]:
    start = time.monotonic()
    try:
        check()
    except Exception:  # any backend failure means "down"
        logger.error("health_check_failure", service=name, exc_info=True)
        return {"status": "down"}
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    services = {
        "database": _probe("database", _check_database),
        "cache": _probe("cache", _check_cache),
    }
    healthy = all(s["status"] == "up" for s in services.values())
    state = "healthy" if healthy else "unhealthy"

    logger.info("health_check_completed", status=state)

    return JsonResponse(
        {
            "status": state,
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )


class WhoAmIView(APIView):
    """Echo the principal decoded from the session token.

    * No token  -> 401
    * Bad token -> 401
    * Valid JWT -> 200 ``{id, role, name}``
    """

    def get(self, request: Request) -> Response:
        principal = request.user
        return Response(
            {"id": principal.id, "role": principal.role, "name": principal.name}
        )


def not_found(request: HttpRequest, exception: Exception | None = None) -> JsonResponse:
    """Unrouted paths get the same ``{"error": ...}`` envelope as the API."""
    return JsonResponse({"error": "Recurso não encontrado"}, status=404)


def server_error(request: HttpRequest) -> JsonResponse:
    return JsonResponse({"error": INTERNAL_ERROR_MESSAGE}, status=500)
