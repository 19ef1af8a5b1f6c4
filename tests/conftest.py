"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import asyncio
from typing import List, Optional

import httpx
import pytest

from linguabridge.core.config import KNOWN_PROVIDERS, ProviderConfig
from linguabridge.core.engine import ResolutionEngine
from linguabridge.core.models import TranslationCandidate
from linguabridge.translation.base import TranslationProvider


class FakeProvider(TranslationProvider):
    """In-memory provider: answers, fails or stalls on demand."""

    def __init__(
        self,
        name: str,
        text: Optional[str] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
        quality_score: Optional[float] = None,
        log: Optional[List[str]] = None,
    ):
        super().__init__(endpoint=f"fake://{name}", timeout=1.0)
        self.name = name
        self.text = text
        self.error = error
        self.delay = delay
        self.quality_score = quality_score
        self.calls = []
        self.cancelled = False
        self.log = log if log is not None else []

    async def translate(self, message, source_lang, target_lang, timeout=None):
        self.calls.append((message, source_lang, target_lang))
        self.log.append(self.name)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error is not None:
            raise self.error
        return TranslationCandidate(self.text, self.name, self.quality_score)


def fast_config(strategy: str = "sequential", timeout: float = 0.2, **overrides) -> ProviderConfig:
    """Default configuration with short timeouts for every provider."""
    config = {
        "providers": {name: {"timeout": timeout} for name in KNOWN_PROVIDERS},
        "resolution": {"strategy": strategy},
    }
    for key, value in overrides.items():
        config[key] = value
    return ProviderConfig.from_dict(config)


@pytest.fixture
def fake_provider():
    """The FakeProvider class, for tests that build their own line-up."""
    return FakeProvider


@pytest.fixture
def make_engine():
    """Build an engine around fake providers keyed by provider name."""
    def _make(providers, strategy="sequential", timeout=0.2, **overrides):
        return ResolutionEngine(
            config=fast_config(strategy, timeout, **overrides),
            providers={p.name: p for p in providers},
        )
    return _make


@pytest.fixture
def failing_providers():
    """One failing fake per known provider, sharing a call log."""
    log: List[str] = []
    return [
        FakeProvider(name, error=RuntimeError(f"{name} down"), log=log)
        for name in KNOWN_PROVIDERS
    ]


@pytest.fixture
def mock_client():
    """Factory for an httpx.AsyncClient answering through a handler function."""
    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make
