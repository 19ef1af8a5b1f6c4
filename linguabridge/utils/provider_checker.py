"""
Provider reachability checks.

Used by ``linguabridge providers --check`` to tell an operator which
upstream services answer at all. It does not translate anything and is never
called on the request path.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import time

import requests

from linguabridge.core.config import KNOWN_PROVIDERS, ProviderConfig
from linguabridge.utils.logger import get_logger

logger = get_logger(__name__)

PROBE_TIMEOUT = 5.0


def probe_url(provider: str, config: ProviderConfig) -> str:
    """URL to probe for a provider; LibreTranslate exposes /languages."""
    endpoint = config.endpoints[provider]
    if provider == "libretranslate":
        return f"{endpoint.rstrip('/')}/languages"
    return endpoint


def check_provider(
    provider: str,
    config: Optional[ProviderConfig] = None,
    timeout: float = PROBE_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    Probe one provider endpoint.

    Any HTTP answer below 500 counts as reachable: several endpoints reject a
    bare GET with 4xx while still being up.

    Args:
        provider: Provider name
        config: Provider configuration (defaults used when omitted)
        timeout: Probe timeout in seconds
        session: Optional requests session

    Returns:
        Status dictionary
    """
    config = config or ProviderConfig.from_dict()
    url = probe_url(provider, config)
    status = {
        "provider": provider,
        "endpoint": url,
        "reachable": False,
        "status_code": None,
        "latency": None,
        "error": None,
    }

    http = session or requests
    start = time.time()
    try:
        response = http.get(url, timeout=timeout)
        status["status_code"] = response.status_code
        status["reachable"] = response.status_code < 500
    except requests.exceptions.RequestException as e:
        status["error"] = str(e)
        logger.warning(f"{provider} probe failed: {e}")
    status["latency"] = round(time.time() - start, 3)

    return status


def get_all_providers_status(
    config: Optional[ProviderConfig] = None,
    timeout: float = PROBE_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Dict[str, Dict[str, Any]]:
    """Probe every known provider."""
    config = config or ProviderConfig.from_dict()
    return {
        provider: check_provider(provider, config, timeout, session)
        for provider in KNOWN_PROVIDERS
    }
