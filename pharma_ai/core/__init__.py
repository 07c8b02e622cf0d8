"""Core request orchestration package.

Architectural role:
    Owns the ordered decision flow for one `/api/ai` request: input
    validation, configuration check, upstream invocation and reply selection.
    HTTP transport concerns stay in `pharma_ai.api`.
"""
