"""
Base translation provider interface.
All provider adapters must inherit from TranslationProvider.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from linguabridge.core.exceptions import ProviderFailure
from linguabridge.core.models import TranslationCandidate


class TranslationProvider(ABC):
    """
    Abstract base class for HTTP translation providers.

    Adapters either return a TranslationCandidate or raise ProviderFailure;
    they never return an empty or partial result.
    """

    name = "provider"

    # Provider-specific spellings of canonical codes
    LANG_CODES: Dict[str, str] = {}

    def __init__(
        self,
        endpoint: str,
        timeout: float = 10.0,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            endpoint: Provider URL
            timeout: Default request timeout in seconds
            api_key: Optional credential, only some providers use it
            client: Shared HTTP client; a short-lived one is opened per call otherwise
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.api_key = api_key
        self._client = client

    def provider_code(self, code: str) -> str:
        return self.LANG_CODES.get(code, code)

    @abstractmethod
    async def translate(
        self,
        message: str,
        source_lang: str,
        target_lang: str,
        timeout: Optional[float] = None,
    ) -> TranslationCandidate:
        """
        Translate text asynchronously.

        Args:
            message: Text to translate
            source_lang: Normalized source code
            target_lang: Normalized target code
            timeout: Per-call timeout, defaults to the provider's own

        Returns:
            Best candidate extracted from the provider response

        Raises:
            ProviderFailure: network error, timeout, bad status or unusable body
        """

    def translate_sync(
        self,
        message: str,
        source_lang: str,
        target_lang: str,
        timeout: Optional[float] = None,
    ) -> TranslationCandidate:
        """Translate synchronously (wraps async)."""
        return asyncio.run(self.translate(message, source_lang, target_lang, timeout))

    async def _request(self, method: str, url: str, timeout: Optional[float] = None, **kwargs) -> httpx.Response:
        """Send one request and turn every transport problem into ProviderFailure."""
        timeout = timeout or self.timeout
        try:
            if self._client is not None:
                response = await self._client.request(method, url, timeout=timeout, **kwargs)
            else:
                async with httpx.AsyncClient(timeout=timeout) as client:
                    response = await client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise ProviderFailure(self.name, f"timed out after {timeout}s", e)
        except httpx.HTTPStatusError as e:
            raise ProviderFailure(
                self.name,
                f"returned {e.response.status_code}",
                e,
                status_code=e.response.status_code
            )
        except httpx.HTTPError as e:
            raise ProviderFailure(self.name, f"request failed: {e}", e)
        return response

    def _json(self, response: httpx.Response) -> Any:
        if not response.text or not response.text.strip():
            raise ProviderFailure(self.name, "empty response body")
        try:
            return response.json()
        except ValueError as e:
            raise ProviderFailure(self.name, f"invalid JSON response: {response.text[:200]}", e)

    def get_info(self) -> Dict:
        """Get provider information."""
        return {
            "name": self.name,
            "endpoint": self.endpoint,
            "timeout": self.timeout,
            "has_api_key": bool(self.api_key)
        }
