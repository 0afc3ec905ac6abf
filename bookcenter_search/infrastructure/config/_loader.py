# bookcenter_search/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from functools import cached_property
from logging import getLogger
from pathlib import Path

# Local imports
from bookcenter_search.core.types.json import JSONDict
from bookcenter_search.infrastructure.config._models import AppConfig
from bookcenter_search.infrastructure.config._models import CatalogConfig
from bookcenter_search.infrastructure.config._models import LoggingConfig
from bookcenter_search.infrastructure.config._models import RetrievalConfig
from bookcenter_search.infrastructure.config._models import ScoringConfig
from bookcenter_search.infrastructure.config._models import SimilarityConfig
from bookcenter_search.infrastructure.config._models import SuggestionsConfig
from bookcenter_search.infrastructure.config._wordlists import WordlistsConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader that provides both config and wordlists"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)
        self._wordlists = WordlistsConfig.load(self._find_wordlists_path())

    def _find_wordlists_path(self) -> Path | None:
        """Find wordlists.json file"""
        # Check in same directory as config
        if self.config_path:
            wordlists_path = Path(self.config_path).parent / "wordlists.json"
            if wordlists_path.exists():
                return wordlists_path

        wordlists_path = Path("wordlists.json")
        if wordlists_path.exists():
            return wordlists_path

        return None

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._app_config.model_dump()

    @property
    def scoring(self) -> ScoringConfig:
        """Scoring configuration"""
        return self._app_config.scoring

    @property
    def retrieval(self) -> RetrievalConfig:
        """Retrieval configuration"""
        return self._app_config.retrieval

    @property
    def similarity(self) -> SimilarityConfig:
        """Similarity thresholds"""
        return self._app_config.similarity

    @property
    def suggestions(self) -> SuggestionsConfig:
        """Suggestion store configuration"""
        return self._app_config.suggestions

    @property
    def catalog(self) -> CatalogConfig:
        """Catalog configuration"""
        return self._app_config.catalog

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging

    @property
    def wordlists(self) -> WordlistsConfig:
        """Wordlists (defaults when no file was found)"""
        return self._wordlists

    @cached_property
    def transliteration_terms(self) -> dict[str, str]:
        """Bangla to Latin dictionary terms"""
        return self._wordlists.get_transliteration_terms()

    @cached_property
    def phonetic_map(self) -> dict[str, list[str]]:
        """Bangla phonetic map"""
        return self._wordlists.get_phonetic_map()


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
