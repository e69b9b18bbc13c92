import time
from typing import Any, Dict

import structlog
from django.conf import settings
from django.db import DatabaseError, connections
from django.http import Http404, HttpRequest, JsonResponse
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework.request import Request
from rest_framework.views import APIView

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except DatabaseError:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_db_failure", exc_info=True)

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


class ErrorProbeView(APIView):
    """Always fails with an unhandled error, to exercise 5xx alerting.

    Disabled (404) unless ``ERROR_PROBE_ENABLED`` is set.
    """

    authentication_classes: list = []

    @extend_schema(exclude=True)
    def get(self, request: Request):
        if not settings.ERROR_PROBE_ENABLED:
            raise Http404
        raise RuntimeError("Simulated server error for alert test")
