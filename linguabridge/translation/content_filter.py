"""
Candidate validation.

Every candidate coming back from a provider passes through ContentFilter
before it can reach a client. The checks are independent; a candidate is
accepted only when all of them pass.
"""

from typing import Iterable, Optional, Tuple

from linguabridge.core.models import TranslationCandidate
from linguabridge.utils.logger import get_logger

logger = get_logger(__name__)

# Matched as case-insensitive substrings, for every language pair.
DEFAULT_BLOCKLIST: Tuple[str, ...] = (
    "allah", "god", "jesus", "pray", "religion", "muslim", "christian",
    "hindu", "bible", "quran", "sex", "fuck", "shit", "ass",
)

DEFAULT_QUALITY_THRESHOLD = 60.0
MIN_LENGTH = 1
MAX_LENGTH = 500


class ContentFilter:
    """Blocklist, identity, length and quality checks for candidates."""

    def __init__(
        self,
        blocklist: Iterable[str] = DEFAULT_BLOCKLIST,
        quality_threshold: float = DEFAULT_QUALITY_THRESHOLD,
        min_length: int = MIN_LENGTH,
        max_length: int = MAX_LENGTH,
    ):
        self.blocklist = tuple(dict.fromkeys(term.lower() for term in blocklist if term))
        self.quality_threshold = quality_threshold
        self.min_length = min_length
        self.max_length = max_length

    def rejection_reason(
        self,
        candidate_text,
        original_text: str,
        quality_score: Optional[float] = None,
    ) -> Optional[str]:
        """
        Return why a candidate is rejected, or None when it is acceptable.

        Args:
            candidate_text: Text proposed by a provider
            original_text: The message that was sent for translation
            quality_score: Provider-reported score (0-100), if any
        """
        if not isinstance(candidate_text, str) or not candidate_text.strip():
            return "empty"

        lowered = candidate_text.lower()
        if isinstance(original_text, str) and lowered.strip() == original_text.lower().strip():
            return "identical to input"

        for term in self.blocklist:
            if term in lowered:
                return f"blocked term '{term}'"

        if not self.min_length <= len(candidate_text) <= self.max_length:
            return f"length {len(candidate_text)} outside [{self.min_length}, {self.max_length}]"

        if quality_score is not None and quality_score < self.quality_threshold:
            return f"quality {quality_score:g} below {self.quality_threshold:g}"

        return None

    def is_acceptable(
        self,
        candidate_text,
        original_text: str,
        quality_score: Optional[float] = None,
    ) -> bool:
        reason = self.rejection_reason(candidate_text, original_text, quality_score)
        if reason:
            logger.info(f"Filtered candidate ({reason}): {candidate_text!r}")
        return reason is None

    def accepts(self, candidate: TranslationCandidate, original_text: str) -> bool:
        return self.is_acceptable(candidate.text, original_text, candidate.quality_score)
