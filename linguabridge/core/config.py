"""
Provider configuration.

ProviderConfig is built once at process start from the dictionary returned
by ``load_config`` and never mutated afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from linguabridge.core.exceptions import ConfigurationError
from linguabridge.utils.config_loader import get_default_config, merge_config

KNOWN_PROVIDERS: Tuple[str, ...] = ("google", "bing", "mymemory", "libretranslate")
STRATEGIES: Tuple[str, ...] = ("sequential", "race")


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ProviderConfig:
    """Static, process-wide provider settings and routing policy."""
    endpoints: Mapping[str, str]
    timeouts: Mapping[str, float]
    default_order: Tuple[str, ...] = KNOWN_PROVIDERS
    routes: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    api_keys: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    strategy: str = "sequential"
    quality_threshold: float = 60.0
    max_message_length: int = 500
    blocklist: Tuple[str, ...] = ()

    def route_for(self, source_lang: str, target_lang: str) -> Tuple[str, ...]:
        """
        Ordered provider names for a language pair.

        Precedence: exact "src-tgt", then "*-tgt", then "src-*", then the
        default order.
        """
        for key in (f"{source_lang}-{target_lang}", f"*-{target_lang}", f"{source_lang}-*"):
            if key in self.routes:
                return self.routes[key]
        return self.default_order

    def timeout_for(self, provider: str) -> float:
        return self.timeouts[provider]

    @classmethod
    def from_dict(cls, config: Optional[Dict[str, Any]] = None) -> "ProviderConfig":
        """
        Validate a configuration dictionary and freeze it.

        Missing sections are filled from the defaults.

        Raises:
            ConfigurationError: unknown provider or strategy, bad numbers
        """
        config = merge_config(get_default_config(), config or {})
        providers = config["providers"]

        order = tuple(providers.get("order") or KNOWN_PROVIDERS)
        _check_names("providers.order", order)

        endpoints: Dict[str, str] = {}
        timeouts: Dict[str, float] = {}
        api_keys: Dict[str, str] = {}
        for name in KNOWN_PROVIDERS:
            settings = providers.get(name) or {}
            endpoint = settings.get("endpoint")
            if not endpoint:
                raise ConfigurationError(
                    f"Missing endpoint for provider '{name}'",
                    config_key=f"providers.{name}.endpoint"
                )
            endpoints[name] = str(endpoint)
            timeouts[name] = _positive_float(f"providers.{name}.timeout", settings.get("timeout", 10.0))
            if settings.get("api_key"):
                api_keys[name] = str(settings["api_key"])

        routes = {}
        for key, names in (config.get("routing") or {}).items():
            names = tuple(names or ())
            _check_names(f"routing.{key}", names)
            routes[str(key)] = names

        resolution = config["resolution"]
        strategy = str(resolution.get("strategy", "sequential")).lower()
        if strategy not in STRATEGIES:
            raise ConfigurationError(
                f"Unknown resolution strategy '{strategy}'",
                config_key="resolution.strategy",
                invalid_value=strategy,
                valid_values=list(STRATEGIES)
            )

        threshold = _float("resolution.quality_threshold", resolution.get("quality_threshold", 60.0))
        if not 0 <= threshold <= 100:
            raise ConfigurationError(
                "Quality threshold must be within 0-100",
                config_key="resolution.quality_threshold",
                invalid_value=threshold
            )

        max_length = int(_positive_float("resolution.max_message_length", resolution.get("max_message_length", 500)))

        return cls(
            endpoints=_frozen(endpoints),
            timeouts=_frozen(timeouts),
            default_order=order,
            routes=_frozen(routes),
            api_keys=_frozen(api_keys),
            strategy=strategy,
            quality_threshold=threshold,
            max_message_length=max_length,
            blocklist=tuple((config.get("filter") or {}).get("blocklist") or ()),
        )


def _check_names(config_key: str, names: Tuple[str, ...]) -> None:
    unknown = [name for name in names if name not in KNOWN_PROVIDERS]
    if unknown:
        raise ConfigurationError(
            f"Unknown provider(s) in {config_key}: {', '.join(unknown)}",
            config_key=config_key,
            invalid_value=unknown,
            valid_values=list(KNOWN_PROVIDERS)
        )


def _float(config_key: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"Expected a number for {config_key}, got {value!r}",
            config_key=config_key,
            invalid_value=value
        )


def _positive_float(config_key: str, value: Any) -> float:
    number = _float(config_key, value)
    if number <= 0:
        raise ConfigurationError(
            f"{config_key} must be positive",
            config_key=config_key,
            invalid_value=value
        )
    return number
