"""LibreTranslate backend (free, no-key by default, endpoint configurable)."""

from typing import Optional

from linguabridge.core.exceptions import ProviderFailure
from linguabridge.core.models import TranslationCandidate
from ..base import TranslationProvider


class LibreTranslateProvider(TranslationProvider):
    """LibreTranslate HTTP provider, JSON POST to <endpoint>/translate."""

    name = "libretranslate"

    async def translate(
        self,
        message: str,
        source_lang: str,
        target_lang: str,
        timeout: Optional[float] = None,
    ) -> TranslationCandidate:
        url = f"{self.endpoint.rstrip('/')}/translate"
        payload = {
            "q": message,
            "source": self.provider_code(source_lang),
            "target": self.provider_code(target_lang),
            "format": "text",
        }
        if self.api_key:
            payload["api_key"] = self.api_key

        response = await self._request("POST", url, timeout=timeout, json=payload)
        data = self._json(response)

        translation = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translation, str) or not translation.strip():
            raise ProviderFailure(self.name, "no translatedText in response")

        return TranslationCandidate(text=translation.strip(), origin_provider=self.name)
