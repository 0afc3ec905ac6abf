# bookcenter_search/application/processing/string_similarity.py

"""Edit-distance similarity and text normalization primitives

All functions are pure and total over strings, including empty ones.
"""

# Standard library imports
from unicodedata import normalize as unicode_normalize

# Third party imports
from Levenshtein import distance as levenshtein_distance

# Local imports
from bookcenter_search.shared.utils.text_utils import is_word_char

DEFAULT_WORD_THRESHOLD = 0.6


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between two strings

    Insertions, deletions and substitutions each cost one. Strings are
    compared code point by code point.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning a into b
    """
    return int(levenshtein_distance(a, b))


def similarity_ratio(a: str, b: str) -> float:
    """Edit-distance closeness of two strings in [0, 1]

    Args:
        a: First string
        b: Second string

    Returns:
        (longest length - distance) / longest length, 1.0 for two empty strings
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - edit_distance(a, b)) / longest


def normalize(text: str) -> str:
    """Canonicalize text for comparison

    Pipeline:
    1. Lowercase
    2. Compose to NFC
    3. Drop everything that is not a letter, mark, digit or whitespace
    4. Collapse whitespace runs and trim
    5. Compose to NFC again (dropping punctuation can leave a base letter
       next to a combining mark)

    Args:
        text: Raw text

    Returns:
        Normalized text; normalize(normalize(s)) == normalize(s)
    """
    if not text:
        return ""

    composed = unicode_normalize("NFC", text.lower())
    kept = "".join(char for char in composed if char.isspace() or is_word_char(char))
    collapsed = " ".join(kept.split())

    return unicode_normalize("NFC", collapsed)


def _best_word_similarity(query_word: str, text_words: list[str]) -> float:
    """Best similarity between a query word and any text word"""
    return max((similarity_ratio(query_word, word) for word in text_words), default=0.0)


def fuzzy_contains(query: str, text: str, threshold: float = DEFAULT_WORD_THRESHOLD) -> bool:
    """Check if text contains the query, tolerating typos

    Args:
        query: Search query
        text: Text to search in
        threshold: Minimum word similarity for a query word to count as present

    Returns:
        True on a normalized substring match, or when every query word has some
        text word at least threshold-similar. An empty query matches nothing.
    """
    normalized_query = normalize(query)
    if not normalized_query:
        return False

    normalized_text = normalize(text)
    if normalized_query in normalized_text:
        return True

    text_words = normalized_text.split()
    return all(
        _best_word_similarity(query_word, text_words) >= threshold
        for query_word in normalized_query.split()
    )


def field_match_score(
    query: str, text: str, word_threshold: float = DEFAULT_WORD_THRESHOLD
) -> float:
    """Score how well a field value matches a query

    Args:
        query: Search query
        text: Field value
        word_threshold: Minimum best-word similarity for a query word to count

    Returns:
        1.0 if the normalized text contains the normalized query, otherwise
        the mean best-word similarity of the query words that clear
        word_threshold (0.0 when none do or the query is empty)
    """
    normalized_query = normalize(query)
    if not normalized_query:
        return 0.0

    normalized_text = normalize(text)
    if normalized_query in normalized_text:
        return 1.0

    text_words = normalized_text.split()
    matched = [
        best
        for best in (
            _best_word_similarity(query_word, text_words)
            for query_word in normalized_query.split()
        )
        if best >= word_threshold
    ]

    if not matched:
        return 0.0
    return sum(matched) / len(matched)
