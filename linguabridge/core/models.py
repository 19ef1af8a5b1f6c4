"""
Core data models for LinguaBridge.

Every model here is request-scoped: created for one inbound message,
consumed by the resolution engine and discarded afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Dict, Optional, Any

from linguabridge.core.exceptions import InvalidRequest

MAX_MESSAGE_LENGTH = 500


@dataclass(frozen=True)
class TranslationRequest:
    """Inbound translation request, exactly as the transport delivered it."""
    message: str
    source_lang: Optional[str]
    target_lang: Optional[str]

    @property
    def text(self) -> str:
        """Message with surrounding whitespace removed."""
        return self.message.strip() if isinstance(self.message, str) else ""

    def validate(self, max_length: int = MAX_MESSAGE_LENGTH) -> None:
        """
        Check the request before any normalization happens.

        Args:
            max_length: Upper bound on the trimmed message length

        Raises:
            InvalidRequest: empty or oversized message, missing languages
        """
        if not isinstance(self.message, str) or not self.text:
            raise InvalidRequest("Message cannot be empty", field="message")
        if len(self.text) > max_length:
            raise InvalidRequest(
                f"Message exceeds {max_length} characters ({len(self.text)})",
                field="message"
            )
        for name in ("source_lang", "target_lang"):
            value = getattr(self, name)
            if value is None or not str(value).strip():
                raise InvalidRequest("Languages must be specified", field=name)


@dataclass(frozen=True)
class TranslationCandidate:
    """A not-yet-validated translation from a provider or the dictionary."""
    text: str
    origin_provider: str
    quality_score: Optional[float] = None  # 0-100 when the provider reports one


@dataclass(frozen=True)
class TranslationResult:
    """The only object handed back to callers of the engine."""
    original: str
    translated: str
    source_lang: str
    target_lang: str
    is_fallback: bool = False
    provider: str = "fallback"
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def to_dict(self) -> Dict[str, Any]:
        """Wire payload in the shape the chat client consumes."""
        return {
            "original": self.original,
            "translated": self.translated,
            "sourceLang": self.source_lang,
            "targetLang": self.target_lang,
            "timestamp": self.timestamp,
            "isFallback": self.is_fallback,
            "provider": self.provider,
            "success": not self.is_fallback,
        }

    def as_record(self) -> Dict[str, Any]:
        """Snake-case representation, mostly for logging and the CLI."""
        return asdict(self)
