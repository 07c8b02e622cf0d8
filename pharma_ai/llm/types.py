"""Data contracts for Gemini `generateContent` responses.

Architectural role:
    Decodes the raw JSON body returned by `pharma_ai.llm.client` into the few
    fields the service cares about, so interpretation logic branches on explicit
    attributes instead of chained dictionary lookups.

Decoded fields:
    - `promptFeedback.blockReason` -> `GenerateContentResponse.block_reason`
    - `candidates[*].content.parts[0].text` -> `Candidate.first_text`

Determinism:
    Pure structural decode. Unknown or malformed fields decode to "absent"
    and never raise.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class UpstreamResponse:
    """Raw upstream result as returned by the transport client.

    Attributes:
        status_code: HTTP status of the provider response.
        body: Parsed JSON body (any JSON value).
    """

    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class Candidate:
    """One generated candidate; only the first content part is kept."""

    first_text: str | None = None

    @classmethod
    def from_json(cls, raw: Any) -> "Candidate":
        if not isinstance(raw, dict):
            return cls()

        content = raw.get("content")
        if not isinstance(content, dict):
            return cls()

        parts = content.get("parts")
        if not isinstance(parts, list) or not parts:
            return cls()

        first_part = parts[0]
        if not isinstance(first_part, dict):
            return cls()

        text = first_part.get("text")
        if not isinstance(text, str):
            return cls()

        return cls(first_text=text)


@dataclass(frozen=True)
class GenerateContentResponse:
    """Typed view of a `generateContent` response body.

    Attributes:
        block_reason: Provider block reason when the prompt was refused.
        prompt_feedback: Raw `promptFeedback` object, kept for diagnostics.
        candidates: Decoded candidates in provider order.
    """

    block_reason: str | None = None
    prompt_feedback: dict = field(default_factory=dict)
    candidates: tuple[Candidate, ...] = ()

    @property
    def blocked(self) -> bool:
        return bool(self.block_reason)

    @property
    def first_text(self) -> str | None:
        if not self.candidates:
            return None
        return self.candidates[0].first_text

    @classmethod
    def from_json(cls, body: Any) -> "GenerateContentResponse":
        """Decode a response body.

        Edge cases:
            - Non-object bodies decode to an empty response.
            - Any falsy `blockReason` (missing, empty, null) counts as not blocked.
            - A non-list `candidates` field counts as no candidates.
        """
        if not isinstance(body, dict):
            return cls()

        feedback = body.get("promptFeedback")
        if not isinstance(feedback, dict):
            feedback = {}

        raw_reason = feedback.get("blockReason")
        block_reason = str(raw_reason) if raw_reason else None

        raw_candidates = body.get("candidates")
        if isinstance(raw_candidates, list):
            candidates = tuple(Candidate.from_json(c) for c in raw_candidates)
        else:
            candidates = ()

        return cls(
            block_reason=block_reason,
            prompt_feedback=feedback,
            candidates=candidates,
        )
