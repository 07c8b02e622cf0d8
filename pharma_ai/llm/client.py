"""Gemini transport client.

Architectural role:
    Executes the single outbound `generateContent` call and hands the parsed
    JSON body back to the engine. Interpretation of that body lives in
    `pharma_ai.safety.interpreter`.

Model invocation flow:
    `engine.PharmacistEngine.handle` -> `asyncio.to_thread(client.generate_content)`
    -> `requests.post(...)` -> `UpstreamResponse(status_code, body)`.

Retry behavior:
    No retry loop and no explicit timeout. Each call is attempted once and
    relies on the HTTP stack defaults.

Failure handling model:
    Transport errors and undecodable bodies are both raised as
    `UpstreamUnavailableError`. A non-2xx status with a JSON body is NOT an
    error here; the status is returned alongside the body.

Security considerations:
    The API key travels as the `key` query parameter and is never included in
    exception messages or log lines produced by this module.
"""

import logging

import requests

from pharma_ai.llm.provider_config import GEMINI_URL_TEMPLATE, ProviderSettings
from pharma_ai.llm.types import UpstreamResponse


logger = logging.getLogger(__name__)


class UpstreamUnavailableError(RuntimeError):
    """The provider could not be reached or returned an unreadable body."""


class GeminiClient:
    """Synchronous client for one Gemini model.

    Args:
        settings: Startup configuration providing model and credential.
        session: Optional `requests.Session`; module-level `requests` is used
            when omitted.
    """

    def __init__(self, settings: ProviderSettings, session: requests.Session | None = None):
        self._settings = settings
        self._http = session if session is not None else requests

    def build_url(self) -> str:
        return GEMINI_URL_TEMPLATE.format(model=self._settings.model)

    def generate_content(self, payload: dict) -> UpstreamResponse:
        """Send one `generateContent` request.

        Args:
            payload: Request body produced by `prompt_builder.build_gemini_body`.

        Returns:
            `UpstreamResponse` with the HTTP status and parsed JSON body,
            whatever the status.

        Raises:
            UpstreamUnavailableError: Network/transport failure or a body that
                is not valid JSON.
        """
        url = self.build_url()

        try:
            response = self._http.post(
                url,
                params={"key": self._settings.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
            )
        except requests.exceptions.RequestException as err:
            raise UpstreamUnavailableError(
                f"Gemini request failed: {type(err).__name__}"
            ) from err

        try:
            body = response.json()
        except ValueError as err:
            raise UpstreamUnavailableError(
                f"Gemini returned a non-JSON body (HTTP {response.status_code})"
            ) from err

        logger.debug("Gemini responded status=%s url=%s", response.status_code, url)

        return UpstreamResponse(status_code=response.status_code, body=body)
