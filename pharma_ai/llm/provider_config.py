"""Provider/runtime configuration for the LLM layer.

Architectural role:
    Centralizes model selection, credential lookup and listen settings for
    `pharma_ai.llm.client`, `pharma_ai.core.engine` and `pharma_ai.api`.

Lifecycle:
    Values are resolved once at startup by `ProviderSettings.from_env()` and
    handed to constructors explicitly. The resulting object is frozen and is the
    only state shared between concurrent requests.

Failure behavior:
    - A missing `GOOGLE_API_KEY` is represented as `None`; the engine answers
      every request with the not-configured reply instead of failing startup.
    - A non-integer `PORT` raises `ValueError` at startup.
"""

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv


GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1/models/"
    "{model}:generateContent"
)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_PORT = 3001
DEFAULT_HOST = "0.0.0.0"
DEFAULT_STATIC_DIR = "public"


@dataclass(frozen=True)
class ProviderSettings:
    """Immutable process configuration.

    Attributes:
        api_key: Gemini credential, or `None` when not configured.
        model: Gemini model identifier interpolated into the endpoint path.
        port: HTTP listen port.
        host: HTTP listen interface.
        static_dir: Directory served at `/` when it exists.
        debug: Enables DEBUG log level and query-text debug logging.
    """

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    static_dir: str = DEFAULT_STATIC_DIR
    debug: bool = False

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def __repr__(self) -> str:
        key_state = "set" if self.api_key else "missing"
        return (
            f"ProviderSettings(api_key=<{key_state}>, model={self.model!r}, "
            f"port={self.port}, host={self.host!r}, "
            f"static_dir={self.static_dir!r}, debug={self.debug})"
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, load_env_file: bool = True):
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of `os.environ` (used by tests).
            load_env_file: Load a local `.env` into `os.environ` first. Ignored
                when `environ` is given.

        Returns:
            Frozen `ProviderSettings`.

        Edge cases:
            - Empty strings count as unset for every variable.
            - `PORT` must parse as an integer in 1..65535.
        """
        if environ is None:
            if load_env_file:
                load_dotenv()
            environ = os.environ

        def _get(name):
            value = environ.get(name)
            if value is None:
                return None
            value = value.strip()
            return value or None

        raw_port = _get("PORT")
        port = DEFAULT_PORT if raw_port is None else _parse_port(raw_port)

        return cls(
            api_key=_get("GOOGLE_API_KEY"),
            model=_get("GOOGLE_MODEL") or DEFAULT_MODEL,
            port=port,
            host=_get("HOST") or DEFAULT_HOST,
            static_dir=_get("STATIC_DIR") or DEFAULT_STATIC_DIR,
            debug=(_get("DEBUG") or "").lower() == "true",
        )


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None
    if not 1 <= port <= 65535:
        raise ValueError(f"PORT must be 1-65535, got {port}")
    return port
