"""
HTTP API adapter for the pharmacist engine.

Architectural role:
- Expose `POST /api/ai`.
- Parse the JSON body and hand it, with the request's correlation id, to
  `pharma_ai.core.engine.PharmacistEngine`.
- Turn the engine `Outcome` into a `{"reply": ...}` JSON response.

API request lifecycle (`POST /api/ai`):
1. `RequestLoggingMiddleware` resolves the correlation id and logs the start.
2. Body is decoded; undecodable JSON is passed on as `None`.
3. The engine validates, calls the provider and selects the reply.
4. Status code and body come straight from the `Outcome`.
5. The middleware sets `X-Request-Id` and logs the end.

Input validation behavior:
- Missing/invalid `query` -> HTTP 400 (decided by the engine).

Error handling strategy:
- Upstream failures are absorbed by the engine and never raised here.
- Anything else follows FastAPI default exception handling.

Other routes:
- CORS is permissive for every route.
- Files under `settings.static_dir` are served at `/` when the directory
  exists at startup.
"""

import logging
import os

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

import pharma_ai
from pharma_ai.api.middleware import (
    REQUEST_ID_HEADER,
    CorrelationContext,
    RequestLoggingMiddleware,
)
from pharma_ai.core.engine import ContentClient, PharmacistEngine
from pharma_ai.llm.client import GeminiClient
from pharma_ai.llm.provider_config import ProviderSettings


logger = logging.getLogger(__name__)


def correlation_context(request: Request) -> CorrelationContext:
    """Return the correlation context resolved by `RequestLoggingMiddleware`."""
    return request.state.correlation


def create_app(settings: ProviderSettings, client: ContentClient | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Startup configuration, shared read-only by all requests.
        client: Transport override; defaults to `GeminiClient(settings)`.

    Returns:
        Configured `FastAPI` instance.
    """
    if client is None:
        client = GeminiClient(settings)

    engine = PharmacistEngine(settings, client)

    app = FastAPI(
        title="AI Pharmacist API",
        description="Relays pharmacy questions to Gemini with a fixed pharmacist prompt.",
        version=pharma_ai.__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    # Outermost: also logs CORS preflight requests.
    app.add_middleware(RequestLoggingMiddleware)

    @app.post("/api/ai")
    async def ask_pharmacist(
        request: Request,
        ctx: CorrelationContext = Depends(correlation_context),
    ):
        """
        Body: `{"query": str}`. Returns: `{"reply": str}` with 200, 400 or 500.
        """
        try:
            body = await request.json()
        except (ValueError, RecursionError):
            # Undecodable or too deeply nested to decode.
            body = None

        outcome = await engine.handle(body, ctx.id)

        return JSONResponse(status_code=outcome.status_code, content=outcome.to_body())

    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.info("Static directory %r not found; static serving disabled", settings.static_dir)

    return app
