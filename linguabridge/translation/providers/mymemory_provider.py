"""MyMemory translation memory API."""

from typing import Any, Callable, List, Optional

import httpx

from linguabridge.core.exceptions import ProviderFailure
from linguabridge.core.models import TranslationCandidate
from ..base import TranslationProvider


def _score(value: Any, fraction: bool = False) -> Optional[float]:
    """
    Score on a 0-100 scale.

    MyMemory reports ``quality`` as 0-100 (often a string) and ``match`` as a
    0-1 fraction; pass ``fraction=True`` for the latter.
    """
    try:
        score = float(value)
    except (TypeError, ValueError):
        return None
    return score * 100 if fraction else score


class MyMemoryProvider(TranslationProvider):
    """
    Query-string GET returning a ranked list of translation-memory matches.

    Matches are ordered by descending quality; on equal quality the match
    that appeared first in the response wins. When an acceptance predicate
    is supplied, matches it rejects are skipped so a lower-ranked clean match
    can still be used. With no usable match, the top-level responseData
    translation is taken instead.
    """

    name = "mymemory"

    LANG_CODES = {"zh": "zh-CN"}

    def __init__(
        self,
        endpoint: str,
        timeout: float = 10.0,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        accept: Optional[Callable[[TranslationCandidate, str], bool]] = None,
    ):
        super().__init__(endpoint, timeout, api_key, client)
        self.accept = accept

    async def translate(
        self,
        message: str,
        source_lang: str,
        target_lang: str,
        timeout: Optional[float] = None,
    ) -> TranslationCandidate:
        params = {
            "q": message,
            "langpair": f"{self.provider_code(source_lang)}|{self.provider_code(target_lang)}",
        }
        if self.api_key:
            params["key"] = self.api_key

        response = await self._request("GET", self.endpoint, timeout=timeout, params=params)
        data = self._json(response)
        if not isinstance(data, dict):
            raise ProviderFailure(self.name, "unexpected response shape")

        status = str(data.get("responseStatus", "200"))
        if status != "200":
            raise ProviderFailure(
                self.name,
                f"responseStatus {status}: {data.get('responseDetails', '')}".strip(),
                status_code=int(status) if status.isdigit() else None
            )

        for candidate in self.rank_matches(data.get("matches")):
            if self.accept is None or self.accept(candidate, message):
                return candidate

        response_data = data.get("responseData") or {}
        text = response_data.get("translatedText") if isinstance(response_data, dict) else None
        if isinstance(text, str) and text.strip():
            return TranslationCandidate(
                text=text.strip(),
                origin_provider=self.name,
                quality_score=_score(response_data.get("match"), fraction=True)
            )

        raise ProviderFailure(self.name, "no suitable translation found")

    def rank_matches(self, matches: Any) -> List[TranslationCandidate]:
        """Candidates from the matches array, best first (stable on ties)."""
        if not isinstance(matches, list):
            return []

        candidates = []
        for match in matches:
            if not isinstance(match, dict):
                continue
            text = match.get("translation")
            if not isinstance(text, str) or not text.strip():
                continue
            score = _score(match.get("quality"))
            if score is None or score == 0:
                score = _score(match.get("match"), fraction=True)
            candidates.append(TranslationCandidate(
                text=text.strip(),
                origin_provider=self.name,
                quality_score=score
            ))

        # sorted() is stable, so equal scores keep response order
        return sorted(candidates, key=lambda c: c.quality_score or 0.0, reverse=True)
