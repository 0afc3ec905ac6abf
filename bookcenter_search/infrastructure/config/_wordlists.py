# bookcenter_search/infrastructure/config/_wordlists.py

"""Pydantic models for the transliteration and phonetic word lists"""

# Standard library imports
import json
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Bangla domain terms and their common Latin spellings
BANGLA_TO_LATIN_TERMS: dict[str, str] = {
    "বাংলা": "bangla",
    "বই": "boi",
    "লেখক": "lekhok",
    "প্রকাশক": "prokashok",
    "প্রকাশনী": "prokashoni",
    "উপন্যাস": "uponnash",
    "কবিতা": "kobita",
    "গল্প": "golpo",
    "ইতিহাস": "itihas",
    "বিজ্ঞান": "biggan",
    "গণিত": "gonit",
    "ভূগোল": "bhugol",
    "নাটক": "natok",
    "প্রবন্ধ": "probondho",
    "ছড়া": "chhora",
    "অভিধান": "obhidhan",
}

# Bangla characters and the Latin phonemes they can be heard as
BANGLA_PHONETIC_MAP: dict[str, list[str]] = {
    "ক": ["k", "c"],
    "খ": ["kh"],
    "গ": ["g"],
    "ঘ": ["gh"],
    "চ": ["ch", "c"],
    "ছ": ["chh"],
    "জ": ["j"],
    "ঝ": ["jh"],
    "ট": ["t"],
    "ঠ": ["th"],
    "ড": ["d"],
    "ঢ": ["dh"],
    "ণ": ["n"],
    "ত": ["t"],
    "থ": ["th"],
    "দ": ["d"],
    "ধ": ["dh"],
    "ন": ["n"],
    "প": ["p"],
    "ফ": ["f", "ph"],
    "ব": ["b", "v"],
    "ভ": ["bh", "v"],
    "ম": ["m"],
    "য": ["z", "j"],
    "র": ["r"],
    "ল": ["l"],
    "শ": ["sh", "s"],
    "ষ": ["sh", "s"],
    "স": ["s"],
    "হ": ["h"],
    "া": ["a"],
    "ি": ["i"],
    "ী": ["ee", "i"],
    "ু": ["u"],
    "ূ": ["oo", "u"],
    "ে": ["e"],
    "ৈ": ["oi"],
    "ো": ["o"],
    "ৌ": ["ou"],
}


class TransliterationConfig(BaseModel):
    """Transliteration dictionary configuration"""

    extra_terms: dict[str, str] = Field(
        default_factory=dict, description="Additional Bangla to Latin word pairs"
    )

    model_config = ConfigDict(extra="allow")


class WordlistsConfig(BaseModel):
    """Root wordlists configuration model"""

    transliteration: TransliterationConfig = Field(default_factory=TransliterationConfig)

    @classmethod
    def load(cls, wordlists_path: Path | str | None = None) -> "WordlistsConfig":
        """Load wordlists from JSON file

        Args:
            wordlists_path: Path to wordlists.json file

        Returns:
            Validated WordlistsConfig instance
        """
        if wordlists_path is None:
            return cls()

        if isinstance(wordlists_path, str):
            wordlists_path = Path(wordlists_path)

        if wordlists_path.exists():
            try:
                with open(wordlists_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return cls.model_validate(data)
            except Exception as e:
                # Standard library imports
                import logging

                logging.getLogger(__name__).warning(
                    f"Failed to load wordlists from {wordlists_path}: {e}. Using defaults."
                )

        return cls()

    def get_transliteration_terms(self) -> dict[str, str]:
        """Built-in Bangla to Latin terms with configured extras merged over them

        Keys and values are lowercased so lookups can be case-insensitive.
        """
        terms = dict(BANGLA_TO_LATIN_TERMS)
        terms.update(self.transliteration.extra_terms)
        return {source.lower(): target.lower() for source, target in terms.items()}

    def get_phonetic_map(self) -> dict[str, list[str]]:
        """Bangla phonetic map"""
        return {char: list(spellings) for char, spellings in BANGLA_PHONETIC_MAP.items()}
