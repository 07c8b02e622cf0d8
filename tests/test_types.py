"""
Tests for the typed Gemini response decode.
"""

import pytest

from pharma_ai.llm.types import Candidate, GenerateContentResponse, UpstreamResponse
from tests.conftest import make_answer_body, make_blocked_body


class TestUpstreamResponse:
    @pytest.mark.parametrize("status,ok", [(200, True), (204, True), (400, False), (500, False)])
    def test_ok(self, status, ok):
        assert UpstreamResponse(status_code=status).ok is ok


class TestGenerateContentResponse:
    def test_answer(self):
        decoded = GenerateContentResponse.from_json(make_answer_body("hi"))

        assert not decoded.blocked
        assert decoded.first_text == "hi"
        assert decoded.candidates == (Candidate(first_text="hi"),)

    def test_blocked(self):
        decoded = GenerateContentResponse.from_json(make_blocked_body("OTHER"))

        assert decoded.blocked
        assert decoded.block_reason == "OTHER"
        assert "safetyRatings" in decoded.prompt_feedback
        assert decoded.first_text is None

    @pytest.mark.parametrize("body", [None, [], "text", 3, {}])
    def test_non_object_or_empty(self, body):
        decoded = GenerateContentResponse.from_json(body)

        assert not decoded.blocked
        assert decoded.candidates == ()
        assert decoded.first_text is None

    @pytest.mark.parametrize("reason", [None, "", 0, False])
    def test_falsy_block_reason(self, reason):
        decoded = GenerateContentResponse.from_json({"promptFeedback": {"blockReason": reason}})

        assert not decoded.blocked

    def test_candidates_not_a_list(self):
        decoded = GenerateContentResponse.from_json({"candidates": {"content": {}}})

        assert decoded.candidates == ()

    def test_only_first_candidate_used(self):
        body = {
            "candidates": [
                {"content": {"parts": []}},
                {"content": {"parts": [{"text": "second"}]}},
            ]
        }

        assert GenerateContentResponse.from_json(body).first_text is None


class TestCandidate:
    @pytest.mark.parametrize(
        "raw",
        [
            None,
            {},
            {"content": None},
            {"content": {"parts": None}},
            {"content": {"parts": []}},
            {"content": {"parts": ["plain"]}},
            {"content": {"parts": [{"text": 5}]}},
            {"content": {"parts": [{"inlineData": {}}]}},
        ],
    )
    def test_missing_text(self, raw):
        assert Candidate.from_json(raw).first_text is None

    def test_first_part_only(self):
        raw = {"content": {"parts": [{"text": "a"}, {"text": "b"}]}}

        assert Candidate.from_json(raw).first_text == "a"
