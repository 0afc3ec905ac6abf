# bookcenter_search/application/processing/transliteration.py

"""Word-level Bangla/Latin transliteration and query variation expansion"""

# Standard library imports
from functools import cache
from logging import getLogger
from types import MappingProxyType
from typing import Mapping
from unicodedata import normalize as unicode_normalize

# Local imports
from bookcenter_search.infrastructure.config import ConfigLoader
from bookcenter_search.infrastructure.config import get_config
from bookcenter_search.shared.utils.text_utils import split_word_runs

logger = getLogger(__name__)


def _lookup_key(word: str) -> str:
    """Dictionary key for a word: composed and lowercased"""
    return unicode_normalize("NFC", word).lower()


class TransliterationDictionary:
    """Immutable bidirectional word mapping between Bangla and Latin spellings

    The reverse direction is derived from the forward one. When two Bangla
    words share a Latin spelling, the one listed last wins.
    """

    def __init__(self, bangla_to_latin: Mapping[str, str]) -> None:
        """Initialize from the forward mapping

        Args:
            bangla_to_latin: Bangla word to Latin spelling pairs
        """
        forward = {
            _lookup_key(source): _lookup_key(target) for source, target in bangla_to_latin.items()
        }
        reverse = {target: source for source, target in forward.items()}

        self._forward: Mapping[str, str] = MappingProxyType(forward)
        self._reverse: Mapping[str, str] = MappingProxyType(reverse)

    @property
    def forward(self) -> Mapping[str, str]:
        """Bangla to Latin mapping"""
        return self._forward

    @property
    def reverse(self) -> Mapping[str, str]:
        """Latin to Bangla mapping"""
        return self._reverse

    def __len__(self) -> int:
        return len(self._forward)


def _substitute_words(text: str, mapping: Mapping[str, str]) -> str:
    """Replace every dictionary word in one pass

    Substitution is whole-word and case-insensitive. Replacements are never
    re-scanned, and words without an entry keep their original spelling.
    """
    if not text:
        return text

    pieces = []
    changed = False
    for run, is_word in split_word_runs(text):
        replacement = mapping.get(_lookup_key(run)) if is_word else None
        if replacement is None:
            pieces.append(run)
        else:
            pieces.append(replacement)
            changed = True

    return "".join(pieces) if changed else text


class QueryVariationExpander:
    """Produces the equivalent spellings of a query across scripts"""

    def __init__(self, dictionary: TransliterationDictionary | None = None) -> None:
        """Initialize with a transliteration dictionary

        Args:
            dictionary: Dictionary to use, the process-wide default if None
        """
        self.dictionary = dictionary if dictionary is not None else default_dictionary()

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "QueryVariationExpander":
        """Expander over the transliteration terms of a specific configuration"""
        return cls(TransliterationDictionary(config.transliteration_terms))

    def bangla_to_latin(self, text: str) -> str:
        """Replace Bangla dictionary words with their Latin spellings"""
        return _substitute_words(text, self.dictionary.forward)

    def latin_to_bangla(self, text: str) -> str:
        """Replace Latin dictionary words with their Bangla spellings"""
        return _substitute_words(text, self.dictionary.reverse)

    def variations_of(self, query: str) -> tuple[str, ...]:
        """All distinct spellings of a query

        Args:
            query: Raw query

        Returns:
            The original query first, then its Bangla to Latin and Latin to
            Bangla substitutions, without duplicates
        """
        variations = [query]
        for variation in (self.bangla_to_latin(query), self.latin_to_bangla(query)):
            if variation not in variations:
                variations.append(variation)
        return tuple(variations)


@cache
def default_dictionary() -> TransliterationDictionary:
    """Process-wide dictionary built once from the configured word lists"""
    terms = get_config().transliteration_terms
    logger.debug(f"Building transliteration dictionary with {len(terms)} terms")
    return TransliterationDictionary(terms)
