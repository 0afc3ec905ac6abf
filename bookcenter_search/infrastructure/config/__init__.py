# bookcenter_search/infrastructure/config/__init__.py

"""Configuration infrastructure for BookCenter search.

This module manages configuration loading, validation, and models.
"""

# Local imports
from bookcenter_search.infrastructure.config._loader import ConfigLoader
from bookcenter_search.infrastructure.config._loader import get_config
from bookcenter_search.infrastructure.config._models import AppConfig
from bookcenter_search.infrastructure.config._models import RetrievalConfig
from bookcenter_search.infrastructure.config._models import ScoringConfig
from bookcenter_search.infrastructure.config._models import SuggestionsConfig
from bookcenter_search.infrastructure.config._wordlists import WordlistsConfig as Wordlists

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "get_config",
    "RetrievalConfig",
    "ScoringConfig",
    "SuggestionsConfig",
    "Wordlists",
]
