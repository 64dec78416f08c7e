import time
import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

from modules.core.metrics import observe_request

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()


class RequestContextMiddleware:
    """Binds a correlation ID to each request and records its latency.

    Reads the X-Request-ID header from the incoming request, or generates a
    UUID4 when absent.  The ID is stored in a ContextVar and bound into the
    structlog context so every log line of the request carries it, and it
    is echoed back in the X-Request-ID response header.

    After the view returns, one latency sample is recorded in the Prometheus
    collectors, labelled by the matched route pattern.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )

        start = time.perf_counter()
        response = self.get_response(request)
        elapsed = time.perf_counter() - start

        match = getattr(request, "resolver_match", None)
        observe_request(
            request.method,
            match.route if match else None,
            response.status_code,
            elapsed,
        )

        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
            duration_ms=round(elapsed * 1000, 2),
        )

        response["X-Request-ID"] = cid
        return response
