# bookcenter_search/__init__.py

"""BookCenter Search Package

Typo-tolerant, bilingual (Bangla/English) search over a book catalog:
fuzzy matching, transliteration variants, phonetic matching, weighted
ranking and query suggestions.
"""

# Local imports
# High-level API
from bookcenter_search.adapters.api import BookSearchAPI

# For users who want lower-level control
from bookcenter_search.application.processing import CandidateScorer
from bookcenter_search.application.processing import PhoneticTransliterator
from bookcenter_search.application.processing import QueryVariationExpander
from bookcenter_search.application.processing import SearchRanker
from bookcenter_search.application.processing import field_match_score
from bookcenter_search.application.processing import fuzzy_contains
from bookcenter_search.application.processing import normalize
from bookcenter_search.application.services import QuerySuggestionStore
from bookcenter_search.application.services import RetrievalCoordinator

# Data models
from bookcenter_search.core.domain import Book
from bookcenter_search.core.domain import RetrievalError
from bookcenter_search.core.domain import ScoredRecord
from bookcenter_search.core.domain import SearchableRecord
from bookcenter_search.infrastructure.config import ConfigLoader
from bookcenter_search.infrastructure.persistence import InMemoryCatalog
from bookcenter_search.infrastructure.persistence import SqliteCatalog

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "BookSearchAPI",
    # Data models
    "Book",
    "SearchableRecord",
    "ScoredRecord",
    "RetrievalError",
    # Search components
    "RetrievalCoordinator",
    "QuerySuggestionStore",
    "SearchRanker",
    "CandidateScorer",
    "QueryVariationExpander",
    "PhoneticTransliterator",
    "normalize",
    "fuzzy_contains",
    "field_match_score",
    # Catalogs
    "InMemoryCatalog",
    "SqliteCatalog",
    # Configuration
    "ConfigLoader",
    # Version
    "__version__",
]
