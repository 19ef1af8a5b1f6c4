"""Language identifier normalization.

Free-form identifiers (English names, native names, bare or region-qualified
codes) are mapped onto the fixed set of supported two-letter codes.
Unrecognized input falls back to English; normalization never raises.
"""

import re
from types import MappingProxyType
from typing import Optional, Tuple

DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES: Tuple[str, ...] = ("en", "hi", "es", "fr", "de", "ja", "ko", "zh", "ar")

LANGUAGE_NAMES = MappingProxyType({
    "en": "English",
    "hi": "Hindi",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "ar": "Arabic",
})

_ALIASES = {
    # English names
    "english": "en",
    "hindi": "hi",
    "spanish": "es",
    "french": "fr",
    "german": "de",
    "japanese": "ja",
    "korean": "ko",
    "chinese": "zh",
    "mandarin": "zh",
    "arabic": "ar",
    # Native names
    "हिन्दी": "hi",
    "हिंदी": "hi",
    "español": "es",
    "castellano": "es",
    "français": "fr",
    "francais": "fr",
    "deutsch": "de",
    "日本語": "ja",
    "한국어": "ko",
    "中文": "zh",
    "汉语": "zh",
    "العربية": "ar",
    # Three-letter codes that show up in browser locales
    "eng": "en",
    "hin": "hi",
    "spa": "es",
    "fra": "fr",
    "fre": "fr",
    "deu": "de",
    "ger": "de",
    "jpn": "ja",
    "kor": "ko",
    "zho": "zh",
    "chi": "zh",
    "ara": "ar",
}
_ALIASES.update({code: code for code in SUPPORTED_LANGUAGES})
LANGUAGE_ALIASES = MappingProxyType(_ALIASES)

_REGION_SUFFIX = re.compile(r"[-_].*$")


def normalize(identifier: Optional[str]) -> str:
    """
    Map a language identifier to a supported two-letter code.

    Args:
        identifier: "Hindi", "hi", "HI ", "en-US", "zh_CN", ...

    Returns:
        Canonical code from SUPPORTED_LANGUAGES, DEFAULT_LANGUAGE on a miss
    """
    if identifier is None:
        return DEFAULT_LANGUAGE

    key = str(identifier).strip().lower()
    if not key:
        return DEFAULT_LANGUAGE

    if key in LANGUAGE_ALIASES:
        return LANGUAGE_ALIASES[key]

    base = _REGION_SUFFIX.sub("", key).strip()
    return LANGUAGE_ALIASES.get(base, DEFAULT_LANGUAGE)


def is_supported(identifier: Optional[str]) -> bool:
    """True when the identifier resolves without hitting the default."""
    if identifier is None:
        return False
    key = str(identifier).strip().lower()
    return key in LANGUAGE_ALIASES or _REGION_SUFFIX.sub("", key) in LANGUAGE_ALIASES


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(normalize(code), LANGUAGE_NAMES[DEFAULT_LANGUAGE])
