"""Microsoft Bing Translator via the public ttranslatev3 endpoint."""

from typing import Optional

from linguabridge.core.exceptions import ProviderFailure
from linguabridge.core.models import TranslationCandidate
from ..base import TranslationProvider


class BingProvider(TranslationProvider):
    """Form-encoded POST; the answer is nested under translations[0].text."""

    name = "bing"

    LANG_CODES = {"zh": "zh-Hans"}

    # Query string the web translator sends with every call
    QUERY = {"isVertical": "1", "IG": "1", "IID": "translator.5023"}

    async def translate(
        self,
        message: str,
        source_lang: str,
        target_lang: str,
        timeout: Optional[float] = None,
    ) -> TranslationCandidate:
        form = {
            "text": message,
            "fromLang": self.provider_code(source_lang),
            "to": self.provider_code(target_lang),
        }
        response = await self._request(
            "POST",
            self.endpoint,
            timeout=timeout,
            params=self.QUERY,
            data=form,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        data = self._json(response)

        try:
            text = data[0]["translations"][0]["text"]
        except (TypeError, IndexError, KeyError) as e:
            raise ProviderFailure(self.name, "no translation found in response", e)

        if not isinstance(text, str) or not text.strip():
            raise ProviderFailure(self.name, "empty translation")

        return TranslationCandidate(text=text.strip(), origin_provider=self.name)
