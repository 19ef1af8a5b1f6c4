"""Translation provider implementations."""

from typing import Callable, Dict, List, Optional, Type

import httpx

from linguabridge.core.config import ProviderConfig
from ..base import TranslationProvider
from .google_provider import GoogleProvider
from .bing_provider import BingProvider
from .mymemory_provider import MyMemoryProvider
from .libre_provider import LibreTranslateProvider

PROVIDERS: Dict[str, Type[TranslationProvider]] = {
    "google": GoogleProvider,
    "bing": BingProvider,
    "mymemory": MyMemoryProvider,
    "libretranslate": LibreTranslateProvider,
}


def build_providers(
    config: ProviderConfig,
    client: Optional[httpx.AsyncClient] = None,
    accept: Optional[Callable] = None,
) -> Dict[str, TranslationProvider]:
    """
    Instantiate every configured provider.

    Args:
        config: Frozen provider configuration
        client: Optional shared HTTP client
        accept: Candidate predicate handed to providers that rank several matches
    """
    providers: Dict[str, TranslationProvider] = {}
    for name, provider_class in PROVIDERS.items():
        kwargs = {
            "endpoint": config.endpoints[name],
            "timeout": config.timeouts[name],
            "api_key": config.api_keys.get(name),
            "client": client,
        }
        if provider_class is MyMemoryProvider:
            kwargs["accept"] = accept
        providers[name] = provider_class(**kwargs)
    return providers


__all__: List[str] = [
    'PROVIDERS',
    'build_providers',
    'TranslationProvider',
    'GoogleProvider',
    'BingProvider',
    'MyMemoryProvider',
    'LibreTranslateProvider',
]
