"""Configuration loading and management."""

import copy
import os
from pathlib import Path
from typing import Dict, Any, Optional

import yaml
from dotenv import load_dotenv

from linguabridge.translation.content_filter import DEFAULT_BLOCKLIST, DEFAULT_QUALITY_THRESHOLD


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file (defaults to configs/default.yaml)

    Returns:
        Configuration dictionary, defaults filled in and env overrides applied
    """
    load_dotenv()

    if config_path is None:
        possible_paths = [
            Path("configs/default.yaml"),
            Path(__file__).parent.parent.parent / "configs" / "default.yaml"
        ]

        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break
        else:
            return override_with_env(get_default_config())

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        loaded = yaml.safe_load(f) or {}

    config = merge_config(get_default_config(), loaded)

    return override_with_env(config)


def save_config(config: Dict[str, Any], config_path: str) -> None:
    """
    Save configuration to YAML file.

    Args:
        config: Configuration dictionary
        config_path: Output path
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base. Lists are replaced, not merged."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def override_with_env(config: Dict[str, Any]) -> Dict[str, Any]:
    """Override config with environment variables."""
    env_mappings = {
        "LIBRETRANSLATE_URL": ["providers", "libretranslate", "endpoint"],
        "LIBRETRANSLATE_API_KEY": ["providers", "libretranslate", "api_key"],
        "LINGUABRIDGE_STRATEGY": ["resolution", "strategy"],
        "LINGUABRIDGE_QUALITY_THRESHOLD": ["resolution", "quality_threshold"],
        "LINGUABRIDGE_LOG_LEVEL": ["logging", "level"],
    }

    for env_var, path in env_mappings.items():
        value = os.getenv(env_var)
        if value:
            current = config
            for key in path[:-1]:
                if key not in current:
                    current[key] = {}
                current = current[key]
            current[path[-1]] = value

    return config


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        "providers": {
            "order": ["google", "bing", "mymemory", "libretranslate"],
            "google": {
                "endpoint": "https://translate.googleapis.com/translate_a/single",
                "timeout": 8.0
            },
            "bing": {
                "endpoint": "https://www.bing.com/ttranslatev3",
                "timeout": 8.0
            },
            "mymemory": {
                "endpoint": "https://api.mymemory.translated.net/get",
                "timeout": 10.0
            },
            "libretranslate": {
                "endpoint": "https://libretranslate.com",
                "timeout": 10.0,
                "api_key": ""
            }
        },
        "routing": {
            "*-hi": ["google", "mymemory", "bing", "libretranslate"],
            "*-zh": ["google", "bing", "libretranslate", "mymemory"],
            "*-ja": ["google", "bing", "libretranslate", "mymemory"],
            "*-ko": ["google", "bing", "libretranslate", "mymemory"]
        },
        "resolution": {
            "strategy": "sequential",
            "quality_threshold": DEFAULT_QUALITY_THRESHOLD,
            "max_message_length": 500
        },
        "filter": {
            "blocklist": list(DEFAULT_BLOCKLIST)
        },
        "logging": {
            "level": "INFO",
            "file": None
        }
    }
