"""Unit tests for candidate validation."""

import pytest

from linguabridge.core.models import TranslationCandidate
from linguabridge.translation.content_filter import DEFAULT_BLOCKLIST, ContentFilter


@pytest.fixture
def content_filter():
    return ContentFilter()


class TestContentFilter:
    """Test ContentFilter checks one at a time."""

    def test_accepts_plain_translation(self, content_filter):
        assert content_filter.is_acceptable("Bonjour le monde", "Hello world")

    @pytest.mark.parametrize("text", ["hello", "Hello", "  HELLO ", "x", "नमस्ते"])
    def test_rejects_identity(self, content_filter, text):
        assert content_filter.is_acceptable(text, text) is False
        assert content_filter.is_acceptable(text.upper(), text.lower()) is False

    @pytest.mark.parametrize("candidate", ["", "   ", None, 42, ["text"]])
    def test_rejects_empty_or_non_text(self, content_filter, candidate):
        assert content_filter.is_acceptable(candidate, "hello") is False

    @pytest.mark.parametrize("term", DEFAULT_BLOCKLIST)
    def test_rejects_blocklisted_terms(self, content_filter, term):
        assert content_filter.is_acceptable(f"Some {term.upper()} here", "whatever") is False

    def test_blocklist_is_substring_match(self, content_filter):
        # "ass" inside "class" is enough to reject
        assert content_filter.is_acceptable("la classe", "the class") is False

    def test_rejects_too_long(self, content_filter):
        assert content_filter.is_acceptable("a" * 501, "b") is False
        assert content_filter.is_acceptable("a" * 500, "b") is True

    def test_quality_threshold(self, content_filter):
        assert content_filter.is_acceptable("Hola", "Hello", quality_score=59.9) is False
        assert content_filter.is_acceptable("Hola", "Hello", quality_score=60) is True
        assert content_filter.is_acceptable("Hola", "Hello", quality_score=None) is True

    def test_custom_threshold_and_blocklist(self):
        strict = ContentFilter(blocklist=["spam"], quality_threshold=90)
        assert strict.is_acceptable("Hola", "Hello", quality_score=85) is False
        assert strict.is_acceptable("no spam please", "x") is False
        assert strict.is_acceptable("god", "x") is True

    def test_rejection_reason(self, content_filter):
        assert content_filter.rejection_reason("Hola", "Hello") is None
        assert content_filter.rejection_reason("", "Hello") == "empty"
        assert content_filter.rejection_reason("Hello", "hello") == "identical to input"
        assert "bible" in content_filter.rejection_reason("the bible", "x")
        assert "quality" in content_filter.rejection_reason("Hola", "Hello", 10)

    def test_accepts_candidate(self, content_filter):
        good = TranslationCandidate("Hola", "mymemory", quality_score=95)
        weak = TranslationCandidate("Hola", "mymemory", quality_score=30)
        assert content_filter.accepts(good, "Hello")
        assert not content_filter.accepts(weak, "Hello")
