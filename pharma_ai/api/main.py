"""
Server entrypoint for the AI Pharmacist API.

Startup sequence:
1. Load `.env` and read process configuration once (`ProviderSettings.from_env`).
2. Configure standard-library logging (INFO, or DEBUG when `DEBUG=true`).
3. Build the FastAPI app with that configuration.
4. Serve it with uvicorn on `HOST:PORT`.

A missing `GOOGLE_API_KEY` does not stop startup; requests are answered with
the not-configured reply until the key is provided and the process restarted.
"""

import logging

import uvicorn

from pharma_ai.api.http_api import create_app
from pharma_ai.llm.provider_config import ProviderSettings


logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main():
    """Run the API server until interrupted."""
    settings = ProviderSettings.from_env()
    configure_logging(settings.debug)

    if not settings.configured:
        logger.warning("GOOGLE_API_KEY is not set; /api/ai will report AI as not configured")

    app = create_app(settings)

    logger.info("Server running at http://localhost:%s (model=%s)", settings.port, settings.model)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
