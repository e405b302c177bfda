# Request logging middleware: one structured log line and one metrics sample per request.

import json
import logging
import time
import uuid

from fastapi import Request, Response
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

from folio.core.logging_config import log_api_request

logger = logging.getLogger("folio.api.requests")

HTTP_REQUESTS_TOTAL = Counter(
    "folio_http_requests_total",
    "HTTP requests handled",
    ["method", "route", "status"],
)
HTTP_REQUEST_DURATION = Histogram(
    "folio_http_request_duration_seconds",
    "HTTP request latency",
    ["method", "route"],
)


def generate_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


def _route_template(request: Request) -> str:
    # Route templates keep label cardinality bounded; raw paths carry ids.
    route = request.scope.get("route")
    if route is not None:
        return getattr(route, "path", "unmatched")
    for candidate in request.app.routes:
        path = getattr(candidate, "path", None)
        if path is None:
            continue
        match, _ = candidate.matches(request.scope)
        if match == Match.FULL:
            return path
    return "unmatched"


def record_request(request: Request, status_code: int, elapsed: float, request_id: str) -> None:
    route = _route_template(request)
    HTTP_REQUESTS_TOTAL.labels(request.method, route, str(status_code)).inc()
    HTTP_REQUEST_DURATION.labels(request.method, route).observe(elapsed)
    log_api_request(
        logger,
        request.method,
        request.url.path,
        status_code=status_code,
        response_time_ms=int(elapsed * 1000),
        user_id=getattr(request.state, "user_id", None),
        request_id=request_id,
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = generate_request_id()
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"Unhandled error: {request.method} {request.url.path}",
                extra={"request_id": request_id},
            )
            response = Response(
                content=json.dumps({"message": "Internal server error", "request_id": request_id}),
                status_code=500,
                media_type="application/json",
            )

        elapsed = time.perf_counter() - started
        try:
            record_request(request, response.status_code, elapsed, request_id)
        except Exception:
            logger.exception("Failed to record request", extra={"request_id": request_id})

        response.headers["X-Request-ID"] = request_id
        return response
