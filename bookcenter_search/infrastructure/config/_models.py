# bookcenter_search/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

# Local imports
from bookcenter_search.core.types.json import JSONDict


class ScoringConfig(BaseModel):
    """Per-field weights and limits for candidate scoring"""

    name_weight: float = Field(5.0, ge=0.0, description="Weight of the name field")
    author_weight: float = Field(3.0, ge=0.0, description="Weight of the author field")
    publisher_weight: float = Field(2.0, ge=0.0, description="Weight of the publisher field")
    notes_weight: float = Field(1.0, ge=0.0, description="Weight of the notes field")
    variation_weight: float = Field(
        0.8, ge=0.0, le=1.0, description="Weight of transliterated query variations"
    )
    max_score: float = Field(10.0, gt=0.0, le=10.0, description="Score cap")
    word_match_threshold: float = Field(
        0.6, ge=0.0, le=1.0, description="Minimum word similarity that counts as a match"
    )


class RetrievalConfig(BaseModel):
    """Two-tier retrieval configuration"""

    min_indexed_hits: int = Field(
        3, ge=0, description="Indexed hits needed to skip the fuzzy scan"
    )
    fuzzy_threshold: float = Field(0.3, ge=0.0, le=10.0, description="Minimum fuzzy score")
    max_results: int = Field(50, gt=0, description="Cap on fuzzy-escalation results")
    phonetic_fallback: bool = Field(
        False, description="Try phonetic matching when the fuzzy scan finds nothing"
    )


class SimilarityConfig(BaseModel):
    """Thresholds for the string similarity primitives"""

    phonetic_match_threshold: float = Field(
        0.7, ge=0.0, le=1.0, description="Similarity above which a phonetic match counts"
    )


class SuggestionsConfig(BaseModel):
    """Query suggestion store configuration"""

    max_entries: int = Field(1000, gt=0, description="Query history bound")
    default_limit: int = Field(5, gt=0, description="Suggestions returned by default")
    similarity_threshold: float = Field(0.7, ge=0.0, le=1.0)


class CatalogConfig(BaseModel):
    """Catalog storage configuration"""

    database_path: str = Field("bookcenter.db", description="SQLite catalog path")


class LoggingConfig(BaseModel):
    """Logging configuration"""

    log_level: str = Field("INFO", description="Logging level")
    log_file: str | None = Field(None, description="Log file path")

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows"""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Root application configuration model"""

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    retrieval: RetrievalConfig = Field(default_factory=RetrievalConfig)
    similarity: SimilarityConfig = Field(default_factory=SimilarityConfig)
    suggestions: SuggestionsConfig = Field(default_factory=SuggestionsConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        # Standard library imports
        import json

        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try to find config.json in current directory
        if config_path is None:
            config_path = Path("config.json")
            if not config_path.exists():
                return cls()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return cls.model_validate(data)
            except Exception as e:
                # Standard library imports
                import logging

                logging.getLogger(__name__).warning(
                    f"Failed to load config from {config_path}: {e}. Using defaults."
                )
                return cls()

        return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary"""
        return self.model_dump()
