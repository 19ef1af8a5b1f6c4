"""Unit tests for core models."""

import dataclasses
from datetime import datetime

import pytest

from linguabridge.core.exceptions import InvalidRequest
from linguabridge.core.models import (
    MAX_MESSAGE_LENGTH,
    TranslationCandidate,
    TranslationRequest,
    TranslationResult,
)


def test_request_text_is_trimmed():
    """Test that text strips whitespace but message keeps it."""
    request = TranslationRequest("  hello \n", "en", "fr")

    assert request.text == "hello"
    assert request.message == "  hello \n"


def test_request_validate_accepts_boundary_length():
    TranslationRequest("a" * MAX_MESSAGE_LENGTH, "en", "fr").validate()


def test_request_validate_rejects_over_length():
    with pytest.raises(InvalidRequest) as exc_info:
        TranslationRequest("a" * (MAX_MESSAGE_LENGTH + 1), "en", "fr").validate()

    assert exc_info.value.field == "message"
    assert "500" in exc_info.value.message


def test_request_validate_custom_limit():
    with pytest.raises(InvalidRequest):
        TranslationRequest("hello", "en", "fr").validate(max_length=3)


@pytest.mark.parametrize("message", ["", "  ", None, 12])
def test_request_validate_rejects_empty(message):
    with pytest.raises(InvalidRequest, match="empty"):
        TranslationRequest(message, "en", "fr").validate()


def test_request_validate_reports_missing_language_field():
    with pytest.raises(InvalidRequest) as exc_info:
        TranslationRequest("hello", "en", None).validate()

    assert exc_info.value.field == "target_lang"


def test_request_is_frozen():
    request = TranslationRequest("hello", "en", "fr")
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.message = "bye"


def test_candidate_defaults():
    candidate = TranslationCandidate("Hola", "google")
    assert candidate.quality_score is None


def test_result_to_dict():
    """Test the wire payload keys."""
    result = TranslationResult(
        original="hello",
        translated="नमस्ते",
        source_lang="en",
        target_lang="hi",
        provider="dictionary",
    )

    payload = result.to_dict()

    assert payload == {
        "original": "hello",
        "translated": "नमस्ते",
        "sourceLang": "en",
        "targetLang": "hi",
        "timestamp": result.timestamp,
        "isFallback": False,
        "provider": "dictionary",
        "success": True,
    }


def test_result_fallback_is_not_success():
    result = TranslationResult("x", "[en → fr] x", "en", "fr", is_fallback=True)

    assert result.provider == "fallback"
    assert result.to_dict()["success"] is False


def test_result_timestamp_is_iso_utc():
    result = TranslationResult("x", "y", "en", "fr")
    parsed = datetime.fromisoformat(result.timestamp)
    assert parsed.utcoffset().total_seconds() == 0


def test_result_as_record():
    record = TranslationResult("x", "y", "en", "fr", provider="bing").as_record()

    assert record["source_lang"] == "en"
    assert record["provider"] == "bing"
    assert "timestamp" in record
