"""
Shared fixtures and fakes for pharma_ai tests.

This module provides:
- Settings with and without a Gemini credential
- A fake transport client recording payloads
- Gemini response body factories
- A FastAPI TestClient wired to the fake transport
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from pharma_ai.api.http_api import create_app
from pharma_ai.llm.provider_config import ProviderSettings
from pharma_ai.llm.types import UpstreamResponse


# =============================================================================
# Gemini Body Factories
# =============================================================================


def make_answer_body(text: str = "1. Take with water") -> dict:
    """Create a successful generateContent body with one text candidate."""
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
            }
        ]
    }


def make_blocked_body(reason: str = "SAFETY", with_candidate: bool = False) -> dict:
    """Create a body signalling a prompt block."""
    body: dict[str, Any] = {
        "promptFeedback": {
            "blockReason": reason,
            "safetyRatings": [{"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "probability": "HIGH"}],
        }
    }
    if with_candidate:
        body.update(make_answer_body("partial text that must not leak"))
    return body


# =============================================================================
# Fake Transport
# =============================================================================


class FakeGeminiClient:
    """Records payloads and returns a canned response or raises."""

    def __init__(self, response: UpstreamResponse | None = None, error: Exception | None = None):
        self.response = response or UpstreamResponse(status_code=200, body=make_answer_body())
        self.error = error
        self.payloads: list[dict] = []

    def generate_content(self, payload: dict) -> UpstreamResponse:
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def calls(self) -> int:
        return len(self.payloads)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def settings(tmp_path) -> ProviderSettings:
    return ProviderSettings(
        api_key="test-key",
        model="gemini-2.5-flash",
        static_dir=str(tmp_path / "no-static"),
    )


@pytest.fixture
def unconfigured_settings(tmp_path) -> ProviderSettings:
    return ProviderSettings(api_key=None, static_dir=str(tmp_path / "no-static"))


@pytest.fixture
def fake_client() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture
def api(settings, fake_client) -> TestClient:
    return TestClient(create_app(settings, client=fake_client))
