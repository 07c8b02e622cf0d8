"""Core request orchestration for pharmacist queries.

Architectural role:
    Transforms one inbound request body into an `Outcome` (HTTP status + reply
    text). Used by `pharma_ai.api.http_api`; independent of FastAPI so it can
    be exercised directly.

Control-flow model (evaluated in order, first match wins):
    1. Invalid input: body is not an object or `query` is missing, not a
       string, or empty -> 400. No upstream call.
    2. Not configured: no API key in settings -> 500. No upstream call.
    3. Upstream failure: client raised `UpstreamUnavailableError` -> 500.
    4. Success: provider body interpreted by `safety.interpreter` -> 200.

Error handling strategy:
    `UpstreamUnavailableError` and any other exception raised by the client
    are caught here and logged with the request id.
    Callers only ever see canned replies; raw provider errors and payloads are
    never placed in an `Outcome`.

Concurrency:
    The transport client is synchronous. It runs on a worker thread through
    `asyncio.to_thread`, so the event loop keeps serving other requests while
    the provider call is in flight. The engine holds no per-request state.

Open behavior:
    A non-2xx provider status with a JSON body is logged and then interpreted
    like a normal body rather than failing the request.
"""

import asyncio
import json
import logging
from typing import Any, Protocol

from pydantic import ValidationError

from pharma_ai.core.types import (
    INVALID_INPUT,
    NOT_CONFIGURED,
    UPSTREAM_FAILURE,
    Outcome,
    QueryRequest,
)
from pharma_ai.llm.client import UpstreamUnavailableError
from pharma_ai.llm.provider_config import ProviderSettings
from pharma_ai.llm.types import UpstreamResponse
from pharma_ai.prompting.prompt_builder import build_gemini_body
from pharma_ai.safety.interpreter import BLOCKED, interpret_response
from pharma_ai.safety.policy import (
    INVALID_QUERY_REPLY,
    NOT_CONFIGURED_REPLY,
    NOT_RESPONDING_REPLY,
)


logger = logging.getLogger(__name__)


class ContentClient(Protocol):
    """Transport contract consumed by the engine."""

    def generate_content(self, payload: dict) -> UpstreamResponse:
        ...


def parse_query(body: Any) -> str | None:
    """Return the validated query, or `None` when the body is unusable."""
    try:
        return QueryRequest.model_validate(body).query
    except ValidationError:
        return None


class PharmacistEngine:
    """Stateless request handler.

    Args:
        settings: Startup configuration (only `api_key` and `debug` are read).
        client: Transport implementing `generate_content(payload)`.
    """

    def __init__(self, settings: ProviderSettings, client: ContentClient):
        self._settings = settings
        self._client = client

    async def handle(self, body: Any, request_id: str) -> Outcome:
        """Handle one `/api/ai` request body.

        Args:
            body: Decoded JSON request body, or `None` when it was not JSON.
            request_id: Correlation id, attached to every log line emitted here.

        Returns:
            `Outcome` for the HTTP adapter. Never raises for upstream problems.
        """
        query = parse_query(body)
        if query is None:
            return Outcome(400, INVALID_QUERY_REPLY, INVALID_INPUT)

        if not self._settings.configured:
            logger.warning("GOOGLE_API_KEY is not set; request_id=%s", request_id)
            return Outcome(500, NOT_CONFIGURED_REPLY, NOT_CONFIGURED)

        if self._settings.debug:
            logger.debug("Query received request_id=%s query=%r", request_id, query)

        payload = build_gemini_body(query)

        try:
            response = await asyncio.to_thread(self._client.generate_content, payload)
        except UpstreamUnavailableError:
            logger.exception("Gemini API error request_id=%s", request_id)
            return Outcome(500, NOT_RESPONDING_REPLY, UPSTREAM_FAILURE)
        except Exception:
            # Unexpected client bug; still must not reach the server loop.
            logger.exception("Unexpected Gemini client failure request_id=%s", request_id)
            return Outcome(500, NOT_RESPONDING_REPLY, UPSTREAM_FAILURE)

        if not response.ok:
            logger.error(
                "Gemini API HTTP error request_id=%s status=%s body=%s",
                request_id,
                response.status_code,
                _dump(response.body),
            )

        interpretation = interpret_response(response.body)

        if interpretation.kind == BLOCKED:
            logger.warning(
                "Prompt blocked request_id=%s feedback=%s",
                request_id,
                _dump(interpretation.prompt_feedback),
            )

        return Outcome(200, interpretation.reply, interpretation.kind)


def _dump(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)
