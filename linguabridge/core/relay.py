"""
Message relay.

Converts an inbound ``sendMessage`` payload into the ``receiveMessage``
reply a chat client expects. The relay never raises, so a transport can send
whatever it returns straight back to the originating client.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from linguabridge.core.engine import DEFAULT_FALLBACK_FORMAT, ResolutionEngine
from linguabridge.core.exceptions import InvalidRequest, SameLanguageError
from linguabridge.translation.languages import normalize
from linguabridge.utils.logger import get_logger

logger = get_logger(__name__)


class MessageRelay:
    """Stateless bridge between a transport payload and the engine."""

    def __init__(self, engine: ResolutionEngine):
        self.engine = engine

    async def handle(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Resolve one payload of the form {message, sourceLang, targetLang}.

        Rejected requests still get a reply: success is False, isFallback is
        True and ``error`` carries the reason.
        """
        payload = payload if isinstance(payload, Mapping) else {}
        message = payload.get("message")
        source_raw = payload.get("sourceLang")
        target_raw = payload.get("targetLang")

        try:
            result = await self.engine.resolve(message, source_raw, target_raw)
        except (InvalidRequest, SameLanguageError) as e:
            logger.error(f"Translation rejected: {e.message}")
            return self._rejection(message, source_raw, target_raw, e)

        logger.info(f"Relayed {result.source_lang}-{result.target_lang} via {result.provider}")
        return result.to_dict()

    def _rejection(self, message, source_raw, target_raw, error) -> Dict[str, Any]:
        source = normalize(source_raw)
        target = normalize(target_raw)
        text = message if isinstance(message, str) else ""

        translated = (
            self.engine.phrases.lookup(text, source, target)
            or DEFAULT_FALLBACK_FORMAT.format(source=source, target=target, message=text.strip()).strip()
        )

        return {
            "original": text,
            "translated": translated,
            "sourceLang": source,
            "targetLang": target,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "isFallback": True,
            "success": False,
            "error": error.to_dict(),
        }
