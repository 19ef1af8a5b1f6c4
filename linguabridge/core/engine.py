# -*- coding: utf-8 -*-
"""
Translation resolution engine.

Turns (message, source, target) into a TranslationResult:

1. validate the request
2. normalize both language identifiers
3. answer from the phrase dictionary when possible (no network)
4. try the routed providers, each under its own timeout, keeping the first
   candidate the content filter accepts
5. otherwise build a synthetic fallback text

Only InvalidRequest and SameLanguageError escape ``resolve``; every provider
problem ends in either the next provider or the fallback text.
"""

import asyncio
from enum import Enum
from typing import Dict, List, Mapping, Optional

import httpx

from linguabridge.core.config import ProviderConfig
from linguabridge.core.exceptions import (
    AllProvidersExhausted,
    ProviderFailure,
    SameLanguageError,
)
from linguabridge.core.models import TranslationCandidate, TranslationRequest, TranslationResult
from linguabridge.translation.base import TranslationProvider
from linguabridge.translation.content_filter import DEFAULT_BLOCKLIST, ContentFilter
from linguabridge.translation.languages import normalize
from linguabridge.translation.phrases import PhraseDictionary, get_phrase_dictionary
from linguabridge.translation.providers import build_providers
from linguabridge.utils.config_loader import load_config
from linguabridge.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_FALLBACK_FORMAT = "[{source} → {target}] {message}"

FALLBACK_FORMATS = {
    ("hi", "en"): "[Translated from Hindi] {message}",
    ("en", "hi"): "[अंग्रेजी से अनुवादित] {message}",
}


class ResolutionState(Enum):
    """Stages a request moves through."""
    NORMALIZING = "normalizing"
    DICTIONARY_LOOKUP = "dictionary_lookup"
    PROVIDER_ATTEMPT = "provider_attempt"
    VALIDATING = "validating"
    DONE = "done"
    FALLBACK = "fallback"


def fallback_text(message: str, source_lang: str, target_lang: str) -> str:
    """Deterministic text used when no provider produced an acceptable candidate."""
    template = FALLBACK_FORMATS.get((source_lang, target_lang), DEFAULT_FALLBACK_FORMAT)
    return template.format(source=source_lang, target=target_lang, message=message)


class ResolutionEngine:
    """
    Stateless resolver; one instance can serve concurrent requests.

    Configuration, dictionary, filter and provider instances are read-only
    after construction.
    """

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        providers: Optional[Mapping[str, TranslationProvider]] = None,
        phrase_dictionary: Optional[PhraseDictionary] = None,
        content_filter: Optional[ContentFilter] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            config: Provider configuration (defaults built from get_default_config)
            providers: Provider instances keyed by name; built from config when omitted
            phrase_dictionary: Verified phrase tables
            content_filter: Candidate validator
            client: Shared HTTP client for the built providers (caller closes it)
        """
        self.config = config or ProviderConfig.from_dict()
        self.content_filter = content_filter or ContentFilter(
            blocklist=self.config.blocklist or DEFAULT_BLOCKLIST,
            quality_threshold=self.config.quality_threshold,
        )
        self.phrases = phrase_dictionary or get_phrase_dictionary()
        if providers is None:
            providers = build_providers(self.config, client=client, accept=self.content_filter.accepts)
        self.providers: Mapping[str, TranslationProvider] = dict(providers)

    @classmethod
    def from_config(cls, config_path: Optional[str] = None, **kwargs) -> "ResolutionEngine":
        """Build an engine from a YAML file (or the defaults plus environment)."""
        return cls(config=ProviderConfig.from_dict(load_config(config_path)), **kwargs)

    def route(self, source_lang: str, target_lang: str) -> List[TranslationProvider]:
        """Providers to try for a pair, in order."""
        return [
            self.providers[name]
            for name in self.config.route_for(source_lang, target_lang)
            if name in self.providers
        ]

    async def resolve(self, message: str, source_lang: str, target_lang: str) -> TranslationResult:
        """
        Resolve one translation request.

        Args:
            message: Text to translate (at most 500 characters once trimmed)
            source_lang: Raw source identifier ("Hindi", "en-US", ...)
            target_lang: Raw target identifier

        Returns:
            TranslationResult; is_fallback is True when no provider succeeded

        Raises:
            InvalidRequest: empty/oversized message or missing languages
            SameLanguageError: both identifiers normalize to the same code
        """
        request = TranslationRequest(message, source_lang, target_lang)
        request.validate(self.config.max_message_length)
        text = request.text

        logger.debug(f"{ResolutionState.NORMALIZING.value}: {source_lang!r} → {target_lang!r}")
        source = normalize(source_lang)
        target = normalize(target_lang)
        if source == target:
            raise SameLanguageError(source)

        logger.debug(f"{ResolutionState.DICTIONARY_LOOKUP.value}: {source}-{target}")
        phrase = self.phrases.lookup(text, source, target)
        if phrase:
            logger.info(f"Verified phrase for {source}-{target}: {phrase!r}")
            return self._result(request, phrase, source, target, provider="dictionary")

        try:
            candidate = await self._resolve_providers(text, source, target)
        except AllProvidersExhausted as e:
            logger.warning(f"{e.message}; returning fallback text")
            logger.debug(f"{ResolutionState.FALLBACK.value}: {e.failures}")
            return self._result(
                request,
                fallback_text(text, source, target),
                source,
                target,
                provider="fallback",
                is_fallback=True,
            )

        logger.debug(f"{ResolutionState.DONE.value}: {candidate.origin_provider}")
        return self._result(request, candidate.text, source, target, provider=candidate.origin_provider)

    def resolve_sync(self, message: str, source_lang: str, target_lang: str) -> TranslationResult:
        """Synchronous wrapper for callers without an event loop."""
        return asyncio.run(self.resolve(message, source_lang, target_lang))

    async def _resolve_providers(self, text: str, source: str, target: str) -> TranslationCandidate:
        providers = self.route(source, target)
        if self.config.strategy == "race" and len(providers) > 1:
            return await self._race(providers, text, source, target)
        return await self._sequential(providers, text, source, target)

    async def _sequential(
        self,
        providers: List[TranslationProvider],
        text: str,
        source: str,
        target: str,
    ) -> TranslationCandidate:
        failures: Dict[str, str] = {}
        for provider in providers:
            try:
                return await self._attempt(provider, text, source, target)
            except ProviderFailure as e:
                failures[provider.name] = e.message
        raise AllProvidersExhausted([p.name for p in providers], failures)

    async def _race(
        self,
        providers: List[TranslationProvider],
        text: str,
        source: str,
        target: str,
    ) -> TranslationCandidate:
        """First accepted candidate wins; the attempts still running are cancelled."""
        tasks = [
            asyncio.create_task(self._attempt(provider, text, source, target))
            for provider in providers
        ]
        failures: Dict[str, str] = {}
        try:
            for finished in asyncio.as_completed(tasks):
                try:
                    return await finished
                except ProviderFailure as e:
                    failures[e.provider] = e.message
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                logger.debug(f"Cancelled {len(pending)} losing provider attempt(s)")
                await asyncio.gather(*pending, return_exceptions=True)
        raise AllProvidersExhausted([p.name for p in providers], failures)

    async def _attempt(
        self,
        provider: TranslationProvider,
        text: str,
        source: str,
        target: str,
    ) -> TranslationCandidate:
        """
        One bounded provider call followed by validation.

        Raises:
            ProviderFailure: for every way the attempt can fail, filter rejection included
        """
        timeout = self.config.timeouts.get(provider.name, provider.timeout)
        logger.debug(f"{ResolutionState.PROVIDER_ATTEMPT.value}: {provider.name} ({timeout}s)")
        try:
            candidate = await asyncio.wait_for(
                provider.translate(text, source, target, timeout=timeout),
                timeout=timeout,
            )
        except ProviderFailure as e:
            logger.warning(f"{e.message}, trying next provider...")
            raise
        except asyncio.TimeoutError as e:
            logger.warning(f"{provider.name} timed out after {timeout}s, trying next provider...")
            raise ProviderFailure(provider.name, f"timed out after {timeout}s", e)
        except Exception as e:
            logger.warning(f"{provider.name} failed: {e!r}, trying next provider...")
            raise ProviderFailure(provider.name, str(e) or type(e).__name__, e)

        if not isinstance(candidate, TranslationCandidate):
            logger.warning(f"{provider.name} returned {type(candidate).__name__}, trying next provider...")
            raise ProviderFailure(provider.name, f"returned {type(candidate).__name__} instead of a candidate")

        logger.debug(f"{ResolutionState.VALIDATING.value}: {provider.name} → {candidate.text!r}")
        reason = self.content_filter.rejection_reason(candidate.text, text, candidate.quality_score)
        if reason:
            logger.info(f"{provider.name} candidate rejected ({reason})")
            raise ProviderFailure(provider.name, f"candidate rejected: {reason}")

        logger.info(f"Translation successful via {provider.name}")
        return candidate

    @staticmethod
    def _result(
        request: TranslationRequest,
        translated: str,
        source: str,
        target: str,
        provider: str,
        is_fallback: bool = False,
    ) -> TranslationResult:
        return TranslationResult(
            original=request.message,
            translated=translated,
            source_lang=source,
            target_lang=target,
            is_fallback=is_fallback,
            provider=provider,
        )
