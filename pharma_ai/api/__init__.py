"""AI Pharmacist API adapter package.

Architectural role:
- Defines the external HTTP boundary (`http_api`) and its request logging
  middleware (`middleware`).
- Provides the server entrypoint (`main`).
- Delegates request decisions to `pharma_ai.core.engine`.
"""
