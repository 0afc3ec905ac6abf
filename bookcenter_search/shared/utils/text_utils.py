# bookcenter_search/shared/utils/text_utils.py

"""Character classification helpers shared by normalization and transliteration"""

# Standard library imports
from unicodedata import category

BANGLA_UNICODE_RANGE = (0x0980, 0x09FF)


def is_word_char(char: str) -> bool:
    """Check whether a character belongs to a word in any script

    Letters, combining marks and digits count. Bangla vowel signs and
    decomposed Latin accents are marks.

    Args:
        char: A single character

    Returns:
        True for letters (L*), marks (M*) and numbers (N*)
    """
    return category(char)[0] in ("L", "M", "N")


def split_word_runs(text: str) -> list[tuple[str, bool]]:
    """Split text into alternating runs of word and non-word characters

    Joining the run texts gives back the input unchanged.

    Args:
        text: Text to split

    Returns:
        List of (run_text, is_word) tuples
    """
    runs: list[tuple[str, bool]] = []
    if not text:
        return runs

    current = [text[0]]
    current_is_word = is_word_char(text[0])
    for char in text[1:]:
        char_is_word = is_word_char(char)
        if char_is_word == current_is_word:
            current.append(char)
        else:
            runs.append(("".join(current), current_is_word))
            current = [char]
            current_is_word = char_is_word
    runs.append(("".join(current), current_is_word))

    return runs


def is_bangla_character(char: str) -> bool:
    """Check whether a character is in the Bengali Unicode block"""
    code_point = ord(char)
    return BANGLA_UNICODE_RANGE[0] <= code_point <= BANGLA_UNICODE_RANGE[1]


def contains_bangla_script(text: str | None) -> bool:
    """Check whether any character of the text is Bangla"""
    return any(is_bangla_character(char) for char in (text or ""))
