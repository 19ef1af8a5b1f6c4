"""Google Translate via the public gtx endpoint (no key)."""

from typing import Optional

from linguabridge.core.exceptions import ProviderFailure
from linguabridge.core.models import TranslationCandidate
from ..base import TranslationProvider


class GoogleProvider(TranslationProvider):
    """Query-string GET against translate_a/single."""

    name = "google"

    LANG_CODES = {"zh": "zh-CN"}

    async def translate(
        self,
        message: str,
        source_lang: str,
        target_lang: str,
        timeout: Optional[float] = None,
    ) -> TranslationCandidate:
        params = {
            "client": "gtx",
            "sl": self.provider_code(source_lang),
            "tl": self.provider_code(target_lang),
            "dt": "t",
            "q": message,
        }
        response = await self._request("GET", self.endpoint, timeout=timeout, params=params)
        data = self._json(response)

        # data[0] holds one [translated, original, ...] entry per sentence
        try:
            segments = data[0]
            text = "".join(seg[0] for seg in segments if seg and isinstance(seg[0], str))
        except (TypeError, IndexError, KeyError) as e:
            raise ProviderFailure(self.name, "unexpected response shape", e)

        if not text.strip():
            raise ProviderFailure(self.name, "no translation found in response")

        return TranslationCandidate(text=text.strip(), origin_provider=self.name)
