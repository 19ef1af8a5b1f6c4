"""
LinguaBridge: real-time text translation relay.

Resolves a (message, source, target) triple into a translation by checking a
verified phrase dictionary first, then chaining free translation providers
under strict timeouts, and finally falling back to a tagged copy of the
message so a client is never left without a reply.

Usage:
    from linguabridge import ResolutionEngine

    engine = ResolutionEngine.from_config()
    result = engine.resolve_sync("hello", "English", "hi")
    print(result.translated)  # नमस्ते
"""

__version__ = "2.0.0"
__author__ = "LinguaBridge Team"
__license__ = "MIT"

from linguabridge.core.exceptions import (
    LinguaBridgeError,
    InvalidRequest,
    SameLanguageError,
    ProviderFailure,
    AllProvidersExhausted,
    ConfigurationError,
)
from linguabridge.core.models import (
    TranslationRequest,
    TranslationCandidate,
    TranslationResult,
)
from linguabridge.core.config import ProviderConfig
from linguabridge.core.engine import ResolutionEngine, ResolutionState, fallback_text
from linguabridge.core.relay import MessageRelay
from linguabridge.translation.languages import normalize, SUPPORTED_LANGUAGES
from linguabridge.translation.content_filter import ContentFilter
from linguabridge.translation.phrases import PhraseDictionary

__all__ = [
    "__version__",
    "LinguaBridgeError", "InvalidRequest", "SameLanguageError",
    "ProviderFailure", "AllProvidersExhausted", "ConfigurationError",
    "TranslationRequest", "TranslationCandidate", "TranslationResult",
    "ProviderConfig", "ResolutionEngine", "ResolutionState", "fallback_text",
    "MessageRelay", "normalize", "SUPPORTED_LANGUAGES",
    "ContentFilter", "PhraseDictionary",
]
