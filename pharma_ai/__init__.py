"""AI Pharmacist query relay.

Architectural role:
    Thin HTTP service that forwards a customer's question to the Gemini
    generative-language API with a fixed pharmacist system prompt and relays
    the model's text answer back as `{"reply": ...}`.

Package split:
    - `api`: FastAPI adapter, request logging middleware, server entrypoint.
    - `core`: request orchestration (validation, outcome mapping).
    - `llm`: provider configuration, transport client, response schema.
    - `prompting`: system prompt and request payload construction.
    - `safety`: canned replies and response interpretation.
"""

__version__ = "1.0.0"
