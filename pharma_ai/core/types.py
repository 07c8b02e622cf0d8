"""Request/response contracts for `pharma_ai.core.engine`.

Architectural role:
    Defines the inbound query schema, the outbound reply schema and the
    outcome object the engine hands back to the HTTP adapter.
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field, StrictStr


class QueryRequest(BaseModel):
    """Inbound body of `POST /api/ai`.

    `StrictStr` rejects numbers, booleans and other non-string JSON values
    instead of coercing them.
    """

    query: StrictStr = Field(min_length=1)


class AIReply(BaseModel):
    """Outbound body of every `/api/ai` response."""

    reply: str


INVALID_INPUT = "invalid_input"
NOT_CONFIGURED = "not_configured"
UPSTREAM_FAILURE = "upstream_failure"


@dataclass(frozen=True)
class Outcome:
    """Terminal result of one handled request.

    Attributes:
        status_code: HTTP status the adapter must respond with.
        reply: Text placed in `{"reply": ...}`.
        kind: Which terminal branch produced the outcome. Success outcomes
            reuse the interpreter kinds (`answered`, `blocked`, `fallback`).
    """

    status_code: int
    reply: str
    kind: str

    def to_body(self) -> dict:
        return AIReply(reply=self.reply).model_dump()
