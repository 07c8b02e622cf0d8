"""LLM access package.

Architectural role:
    Provides provider configuration, the Gemini transport client and the typed
    response schema used by the orchestration layer.

Module split:
    - `provider_config`: environment-driven settings, read once at startup.
    - `client`: single-call HTTP transport to `generateContent`.
    - `types`: typed decode of provider responses.
"""
