# bookcenter_search/application/processing/phonetics.py

"""Bangla phonetic folding for matching Latin-typed queries against Bangla text"""

# Standard library imports
from functools import cache
from logging import getLogger
from types import MappingProxyType
from typing import Mapping

# Local imports
from bookcenter_search.application.processing.string_similarity import similarity_ratio
from bookcenter_search.infrastructure.config import ConfigLoader
from bookcenter_search.infrastructure.config import get_config

logger = getLogger(__name__)

DEFAULT_PHONETIC_THRESHOLD = 0.7


class PhoneticTransliterator:
    """Folds Bangla characters into candidate Latin phoneme spellings

    Folding is lossy: every candidate spelling of a character is
    emitted, and characters that are neither mapped nor ASCII letters are
    dropped.
    """

    def __init__(
        self,
        phonetic_map: Mapping[str, list[str]] | None = None,
        match_threshold: float = DEFAULT_PHONETIC_THRESHOLD,
    ) -> None:
        """Initialize with a phonetic map

        Args:
            phonetic_map: Character to spellings table, the configured Bangla map if None
            match_threshold: Similarity above which a query counts as a phonetic match
        """
        if phonetic_map is None:
            phonetic_map = get_config().phonetic_map
        self._phonetic_map: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {char: tuple(spellings) for char, spellings in phonetic_map.items()}
        )
        self.match_threshold = match_threshold

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "PhoneticTransliterator":
        """Transliterator using the phonetic map and threshold of a specific configuration"""
        return cls(config.phonetic_map, config.similarity.phonetic_match_threshold)

    @property
    def phonetic_map(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only character to spellings table"""
        return self._phonetic_map

    def to_phonetic_sequence(self, text: str) -> list[str]:
        """Convert text into its sequence of phoneme tokens

        Args:
            text: Text, usually in Bangla script

        Returns:
            All candidate spellings of each mapped character in order, plus
            lowercased ASCII letters
        """
        tokens: list[str] = []
        for char in text:
            spellings = self._phonetic_map.get(char)
            if spellings:
                tokens.extend(spellings)
            elif char.isascii() and char.isalpha():
                tokens.append(char.lower())
        return tokens

    def phonetic_matches(self, latin_query: str, text: str) -> bool:
        """Check if a Latin query sounds like the given text

        Args:
            latin_query: Query typed in Latin script
            text: Text to compare against, usually in Bangla script

        Returns:
            True if the folded text contains the query (whitespace removed,
            lowercased) or is more than match_threshold similar to it
        """
        compact_query = "".join(latin_query.lower().split())
        if not compact_query:
            return False

        phonetic_text = "".join(self.to_phonetic_sequence(text))
        if compact_query in phonetic_text:
            return True

        return similarity_ratio(compact_query, phonetic_text) > self.match_threshold


@cache
def default_transliterator() -> PhoneticTransliterator:
    """Process-wide transliterator built once from the configured map"""
    config = get_config()
    logger.debug(f"Building phonetic map with {len(config.phonetic_map)} characters")
    return PhoneticTransliterator.from_config(config)
