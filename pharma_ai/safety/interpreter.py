"""Rule-based interpretation of Gemini responses.

Purpose:
    Map a parsed provider body to the reply text shown to the customer.

Decision model:
    Fixed precedence, evaluated on the typed `GenerateContentResponse`:
    1. Prompt blocked by the provider -> `SAFETY_BLOCK_REPLY`.
       Takes priority over any candidate text present in the same body.
    2. First candidate's first text part present and non-empty -> that text,
       unmodified.
    3. Otherwise -> `FALLBACK_REPLY`.

Failure handling:
    Never raises. Malformed or unhelpful bodies land in the fallback branch;
    transport and decode failures are handled before this module is reached.
"""

from dataclasses import dataclass
from typing import Any

from pharma_ai.llm.types import GenerateContentResponse
from pharma_ai.safety.policy import FALLBACK_REPLY, SAFETY_BLOCK_REPLY


BLOCKED = "blocked"
ANSWERED = "answered"
FALLBACK = "fallback"


@dataclass(frozen=True)
class Interpretation:
    """Reply selected for one provider body.

    Attributes:
        reply: Text returned to the caller.
        kind: One of `blocked`, `answered`, `fallback`.
        prompt_feedback: Provider feedback object when the prompt was blocked.
    """

    reply: str
    kind: str
    prompt_feedback: dict | None = None


def interpret_response(body: Any) -> Interpretation:
    """Select the reply for a parsed `generateContent` body."""
    decoded = GenerateContentResponse.from_json(body)

    if decoded.blocked:
        return Interpretation(
            reply=SAFETY_BLOCK_REPLY,
            kind=BLOCKED,
            prompt_feedback=decoded.prompt_feedback,
        )

    text = decoded.first_text
    if text:
        return Interpretation(reply=text, kind=ANSWERED)

    return Interpretation(reply=FALLBACK_REPLY, kind=FALLBACK)
