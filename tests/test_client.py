"""
Tests for the Gemini transport client.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from pharma_ai.llm.client import GeminiClient, UpstreamUnavailableError
from pharma_ai.llm.provider_config import ProviderSettings
from pharma_ai.prompting.prompt_builder import build_gemini_body
from tests.conftest import make_answer_body


def make_http_response(status_code=200, body=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return GeminiClient(ProviderSettings(api_key="secret-key", model="gemini-test"), session=session)


class TestBuildUrl:
    def test_model_in_path(self, client):
        assert client.build_url() == (
            "https://generativelanguage.googleapis.com/v1/models/gemini-test:generateContent"
        )


class TestGenerateContent:
    def test_posts_json_with_key_param(self, client, session):
        session.post.return_value = make_http_response(body=make_answer_body())
        payload = build_gemini_body("hello")

        client.generate_content(payload)

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0].endswith("/models/gemini-test:generateContent")
        assert kwargs["params"] == {"key": "secret-key"}
        assert kwargs["headers"] == {"Content-Type": "application/json"}
        assert kwargs["json"] is payload
        assert "timeout" not in kwargs

    def test_returns_parsed_body(self, client, session):
        body = make_answer_body("1. Take with water")
        session.post.return_value = make_http_response(body=body)

        result = client.generate_content({})

        assert result.status_code == 200
        assert result.ok
        assert result.body == body

    def test_non_2xx_is_returned_not_raised(self, client, session):
        body = {"error": {"code": 429, "message": "quota"}}
        session.post.return_value = make_http_response(status_code=429, body=body)

        result = client.generate_content({})

        assert result.status_code == 429
        assert not result.ok
        assert result.body == body

    def test_transport_error(self, client, session):
        session.post.side_effect = requests.exceptions.ConnectionError("connection refused")

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            client.generate_content({})

        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)
        assert "secret-key" not in str(exc_info.value)

    def test_decode_error(self, client, session):
        session.post.return_value = make_http_response(
            status_code=502,
            json_error=requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0),
        )

        with pytest.raises(UpstreamUnavailableError, match="HTTP 502"):
            client.generate_content({})

    def test_single_attempt(self, client, session):
        session.post.side_effect = requests.exceptions.Timeout("slow")

        with pytest.raises(UpstreamUnavailableError):
            client.generate_content({})

        assert session.post.call_count == 1


class TestDefaultTransport:
    def test_uses_requests_module(self):
        client = GeminiClient(ProviderSettings(api_key="k"))

        with patch("pharma_ai.llm.client.requests.post") as post:
            post.return_value = make_http_response(body={"candidates": []})
            result = client.generate_content({})

        post.assert_called_once()
        assert result.body == {"candidates": []}
