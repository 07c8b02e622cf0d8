"""
Request correlation and structured request logging.

Every request gets a correlation id (inbound `X-Request-Id` when present,
otherwise a fresh UUID4), echoed on the response, and produces exactly one
`request_start` and one `request_end` JSON log line.
An exception escaping the app is logged and answered with a 500
`{"reply": ...}` body that still carries the correlation id.
"""
import json
import logging
import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from pharma_ai.core.types import AIReply
from pharma_ai.safety.policy import NOT_RESPONDING_REPLY


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"


@dataclass(frozen=True)
class CorrelationContext:
    """Per-request correlation data; lives only for the request duration."""

    id: str
    start_time: float


def resolve_correlation(inbound_id: str | None) -> CorrelationContext:
    """Reuse a non-empty inbound id or generate a new one."""
    return CorrelationContext(
        id=inbound_id or str(uuid.uuid4()),
        start_time=time.perf_counter(),
    )


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def log_request_start(ctx: CorrelationContext, method: str, url: str, remote: str, user_agent: str) -> None:
    logger.info(json.dumps({
        "ts": _timestamp(),
        "event": "request_start",
        "id": ctx.id,
        "method": method,
        "url": url,
        "remote": remote,
        "userAgent": user_agent,
    }))


def log_request_end(ctx: CorrelationContext, method: str, url: str, status: int) -> None:
    duration_ms = int((time.perf_counter() - ctx.start_time) * 1000)
    logger.info(json.dumps({
        "ts": _timestamp(),
        "event": "request_end",
        "id": ctx.id,
        "method": method,
        "url": url,
        "status": status,
        "duration_ms": duration_ms,
    }))


def _request_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url += "?" + request.url.query
    return url


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Attach correlation ids and log request start/end"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        ctx = resolve_correlation(request.headers.get(REQUEST_ID_HEADER))
        method = request.method
        url = _request_url(request)

        log_request_start(
            ctx,
            method=method,
            url=url,
            remote=request.client.host if request.client else "",
            user_agent=request.headers.get("user-agent", ""),
        )

        # Read by `http_api.correlation_context`.
        request.state.correlation = ctx

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error request_id=%s", ctx.id)
            response = JSONResponse(
                status_code=500,
                content=AIReply(reply=NOT_RESPONDING_REPLY).model_dump(),
            )

        response.headers[REQUEST_ID_HEADER] = ctx.id
        log_request_end(ctx, method, url, response.status_code)
        return response
