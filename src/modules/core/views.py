import time
from typing import Any, Dict

import structlog
from django.db import connections
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils import timezone
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    healthy = True

    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "UP",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["database"] = {"status": "DOWN"}
        healthy = False
        logger.error("health_check_db_failure", exc_info=True)

    overall = "UP" if healthy else "DOWN"
    logger.info("health_check_completed", status=overall)

    return JsonResponse(
        {
            "status": overall,
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )


def metrics(request: HttpRequest) -> HttpResponse:
    """Prometheus exposition of the default registry."""
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
