# tests/unit/application/processing/test_phonetics.py

"""Tests for Bangla phonetic folding"""

# Third party imports
import pytest

# Local imports
from bookcenter_search.application.processing.phonetics import PhoneticTransliterator
from bookcenter_search.application.processing.phonetics import default_transliterator


class TestToPhoneticSequence:
    """Test conversion of text to phoneme tokens"""

    def setup_method(self) -> None:
        """Set up test fixtures"""
        self.transliterator = PhoneticTransliterator()

    def test_all_candidate_spellings_are_emitted(self):
        # ক -> k, c; ব -> b, v; ি -> i; ত -> t; া -> a
        assert self.transliterator.to_phonetic_sequence("কবিতা") == [
            "k",
            "c",
            "b",
            "v",
            "i",
            "t",
            "a",
        ]

    def test_unmapped_characters_are_dropped(self):
        # Independent vowel ই has no entry
        assert self.transliterator.to_phonetic_sequence("বই") == ["b", "v"]
        assert self.transliterator.to_phonetic_sequence("১২৩ !") == []

    def test_ascii_letters_pass_through_lowercased(self):
        assert self.transliterator.to_phonetic_sequence("AbC 1") == ["a", "b", "c"]

    def test_empty_text(self):
        assert self.transliterator.to_phonetic_sequence("") == []


class TestPhoneticMatches:
    """Test Latin-to-Bangla phonetic matching"""

    def setup_method(self) -> None:
        """Set up test fixtures"""
        self.transliterator = PhoneticTransliterator()

    def test_substring_of_folded_text(self):
        # Folded text is "kcbvita"
        assert self.transliterator.phonetic_matches("Vi Ta", "কবিতা")

    def test_close_enough_spelling(self):
        # "kobita" vs "kcbvita": distance 2 over 7 characters
        assert self.transliterator.phonetic_matches("kobita", "কবিতা")

    def test_different_word(self):
        assert not self.transliterator.phonetic_matches("golpo", "কবিতা")

    def test_blank_query_never_matches(self):
        assert not self.transliterator.phonetic_matches("   ", "কবিতা")
        assert not self.transliterator.phonetic_matches("", "")

    def test_threshold_is_configurable(self):
        strict = PhoneticTransliterator(match_threshold=0.9)
        assert not strict.phonetic_matches("kobita", "কবিতা")


class TestPhoneticMap:
    """Test the phonetic table"""

    def test_custom_map(self):
        transliterator = PhoneticTransliterator({"x": ["ks"]})
        assert transliterator.to_phonetic_sequence("ax") == ["a", "ks"]

    def test_map_is_read_only(self):
        transliterator = PhoneticTransliterator()
        with pytest.raises(TypeError):
            transliterator.phonetic_map["ক"] = ("q",)  # type: ignore[index]

    def test_default_map_covers_consonants_and_vowel_signs(self):
        phonetic_map = PhoneticTransliterator().phonetic_map
        assert len(phonetic_map) == 39
        assert phonetic_map["ফ"] == ("f", "ph")
        assert phonetic_map["ৌ"] == ("ou",)

    def test_default_transliterator_is_shared(self):
        assert default_transliterator() is default_transliterator()
        assert default_transliterator().match_threshold == 0.7
