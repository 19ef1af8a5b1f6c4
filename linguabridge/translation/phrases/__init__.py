"""
Verified phrase dictionary.

Short conversational phrases (greetings, courtesies, yes/no, common
questions) are answered from static tables before any provider is called.
Each direction lives in its own JSON file named ``<source>-<target>.json``
next to this module; the two directions of a pair are kept independently and
need not be inverses of each other.
"""

from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple
import json
import re

from linguabridge.utils.logger import get_logger

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_DIRECTION_FILE = re.compile(r"^([a-z]{2})-([a-z]{2})\.json$")


def phrase_key(text: str) -> str:
    """Lookup key: trimmed, whitespace collapsed, case-folded."""
    return _WHITESPACE.sub(" ", text.strip()).casefold()


class PhraseDictionary:
    """
    Read-only bilingual phrase lookup.

    Tables are loaded once at construction and frozen; lookups never touch
    the filesystem or the network.
    """

    def __init__(self, tables: Optional[Mapping[Tuple[str, str], Mapping[str, str]]] = None):
        """
        Args:
            tables: Optional in-memory tables keyed by (source, target).
                    Defaults to the JSON files shipped with the package.
        """
        if tables is None:
            tables = self._load_directory(self.default_directory())

        self._tables = MappingProxyType({
            direction: MappingProxyType({phrase_key(k): v for k, v in entries.items()})
            for direction, entries in tables.items()
        })

    @staticmethod
    def default_directory() -> Path:
        return Path(__file__).parent

    @classmethod
    def from_directory(cls, directory: Path) -> "PhraseDictionary":
        return cls(cls._load_directory(Path(directory)))

    @staticmethod
    def _load_directory(directory: Path) -> Dict[Tuple[str, str], Dict[str, str]]:
        tables: Dict[Tuple[str, str], Dict[str, str]] = {}
        for path in sorted(directory.glob("*.json")):
            match = _DIRECTION_FILE.match(path.name)
            if not match:
                logger.debug(f"Skipping non-phrase file {path.name}")
                continue
            with open(path, encoding="utf-8") as f:
                entries = json.load(f)
            tables[(match.group(1), match.group(2))] = entries
            logger.debug(f"Loaded {len(entries)} phrases for {path.stem}")
        return tables

    def lookup(self, message: str, source_lang: str, target_lang: str) -> Optional[str]:
        """
        Exact-match lookup of a message for one direction.

        Args:
            message: Raw request text
            source_lang: Normalized source code
            target_lang: Normalized target code

        Returns:
            The verified translation, or None when the phrase is unknown
        """
        table = self._tables.get((source_lang, target_lang))
        if not table or not isinstance(message, str):
            return None
        return table.get(phrase_key(message))

    def directions(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(sorted(self._tables))

    def phrases_for(self, source_lang: str, target_lang: str) -> Mapping[str, str]:
        return self._tables.get((source_lang, target_lang), MappingProxyType({}))

    def __contains__(self, direction: Tuple[str, str]) -> bool:
        return direction in self._tables

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.directions())

    def __len__(self) -> int:
        return sum(len(table) for table in self._tables.values())


@lru_cache(maxsize=1)
def get_phrase_dictionary() -> PhraseDictionary:
    """Process-wide dictionary built from the bundled tables."""
    return PhraseDictionary()
