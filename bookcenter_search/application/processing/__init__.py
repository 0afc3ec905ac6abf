# bookcenter_search/application/processing/__init__.py

"""Matching, transliteration and scoring algorithms"""

# Local imports
from bookcenter_search.application.processing.phonetics import PhoneticTransliterator
from bookcenter_search.application.processing.scoring import CandidateScorer
from bookcenter_search.application.processing.scoring import SearchRanker
from bookcenter_search.application.processing.string_similarity import edit_distance
from bookcenter_search.application.processing.string_similarity import field_match_score
from bookcenter_search.application.processing.string_similarity import fuzzy_contains
from bookcenter_search.application.processing.string_similarity import normalize
from bookcenter_search.application.processing.string_similarity import similarity_ratio
from bookcenter_search.application.processing.transliteration import QueryVariationExpander
from bookcenter_search.application.processing.transliteration import (
    TransliterationDictionary,
)

__all__ = [
    "CandidateScorer",
    "PhoneticTransliterator",
    "QueryVariationExpander",
    "SearchRanker",
    "TransliterationDictionary",
    "edit_distance",
    "field_match_score",
    "fuzzy_contains",
    "normalize",
    "similarity_ratio",
]
