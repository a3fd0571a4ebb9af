"""Request logging middleware for the odds service."""

import re
import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from structlog.contextvars import bind_contextvars, clear_contextvars

log = structlog.get_logger()

QUIET_PATHS = {"/", "/health"}
REQUEST_ID_HEADER = "X-Request-ID"

# Caller-supplied ids are reused only when they look like an id
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def resolve_request_id(header_value: str | None) -> str:
    """Reuse a well-formed incoming request id, otherwise mint a new one."""
    if header_value and _REQUEST_ID_RE.match(header_value):
        return header_value
    return str(uuid.uuid4())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log odds lookups with structured metadata.

    - Binds request_id so fetcher and Odds API client logs share it
    - Echoes the request id back in the X-Request-ID response header
    - Tags lookups with sportKey and market, never with team, line or books
    - Logs 5xx responses at warning level; root and health checks stay quiet
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        clear_contextvars()

        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        if request.url.path in QUIET_PATHS:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        sport_key = request.query_params.get("sportKey")
        if sport_key:
            bind_contextvars(sport_key=sport_key)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = int((time.perf_counter() - start_time) * 1000)

        response.headers[REQUEST_ID_HEADER] = request_id
        log_method = log.warning if response.status_code >= 500 else log.info
        log_method(
            "request_completed",
            status_code=response.status_code,
            duration_ms=duration_ms,
            market=request.query_params.get("market"),
        )

        return response
