# bookcenter_search/adapters/api/_search_api.py

"""High-level search facade wiring configuration, catalog and services"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from typing import Iterable

# Local imports
from bookcenter_search.application.services import QuerySuggestionStore
from bookcenter_search.application.services import RetrievalCoordinator
from bookcenter_search.core.domain.errors import RetrievalError
from bookcenter_search.core.domain.record import Book
from bookcenter_search.core.domain.record import ScoredRecord
from bookcenter_search.core.domain.record import SearchableRecord
from bookcenter_search.core.types.protocols import CatalogProtocol
from bookcenter_search.core.types.protocols import SearchAnalyticsProtocol
from bookcenter_search.infrastructure.config import ConfigLoader
from bookcenter_search.infrastructure.config import get_config
from bookcenter_search.infrastructure.persistence import SqliteCatalog
from bookcenter_search.infrastructure.persistence import load_records

logger = getLogger(__name__)


class BookSearchAPI:
    """Caller-facing search over a book catalog

    Retrieval failures are logged and surface as empty results, so callers
    never see a RetrievalError. Every completed search is written to the
    analytics store, whose history also warms the suggestion store.
    """

    def __init__(
        self,
        config_path: str | None = None,
        catalog: CatalogProtocol | None = None,
        analytics: SearchAnalyticsProtocol | None = None,
        database_path: str | Path | None = None,
    ) -> None:
        """Initialize the facade

        Args:
            config_path: Path to configuration JSON file
            catalog: Candidate source; a SqliteCatalog at database_path if None
            analytics: Analytics store; defaults to the catalog when it is a
                SqliteCatalog, otherwise analytics are not recorded
            database_path: SQLite file overriding the configured catalog path
        """
        self.config: ConfigLoader = get_config(config_path) if config_path else get_config()

        self._owns_catalog = catalog is None
        if catalog is None:
            catalog = SqliteCatalog(database_path or self.config.catalog.database_path)
        self.catalog = catalog

        if analytics is None and isinstance(catalog, SqliteCatalog):
            analytics = catalog
        self.analytics = analytics

        self.suggestion_store = QuerySuggestionStore(self.config)
        self.coordinator = RetrievalCoordinator(
            self.catalog, suggestion_store=self.suggestion_store, config=self.config
        )
        self._warm_suggestions()

    def _warm_suggestions(self) -> None:
        """Load recent analytics queries into the suggestion store"""
        if self.analytics is None:
            return
        try:
            history = self.analytics.recent_queries(self.suggestion_store.max_entries)
        except Exception as e:
            logger.warning(f"Could not load query history for suggestions: {e}")
            return
        self.suggestion_store.load(history)
        logger.debug(f"Warmed suggestion store with {len(history)} past queries")

    # Searching

    def search(self, query: str, limit: int | None = None) -> list[SearchableRecord]:
        """Search the catalog

        Args:
            query: Raw query as typed by the user
            limit: Maximum number of results, all if None

        Returns:
            Relevant records, most relevant first; empty on retrieval failure
        """
        try:
            results = self.coordinator.search(query)
        except RetrievalError as e:
            logger.error(f"Search failed for {e.query!r}: {e.__cause__ or e}")
            return []

        self._record_analytics(query, len(results))
        return results[:limit] if limit is not None else results

    def search_scored(self, query: str, limit: int | None = None) -> list[ScoredRecord]:
        """Search and attach each result's relevance score

        Scores are for display; result order is the retrieval order.
        """
        scorer = self.coordinator.ranker.scorer
        return [
            ScoredRecord(record=record, score=scorer.score(query, record))
            for record in self.search(query, limit)
        ]

    def suggestions(self, partial_query: str, limit: int | None = None) -> list[str]:
        """Autocomplete suggestions from past searches"""
        return self.suggestion_store.suggest(partial_query, limit)

    def _record_analytics(self, query: str, results_count: int) -> None:
        if self.analytics is None:
            return
        try:
            self.analytics.record_search(query, results_count)
        except Exception as e:
            logger.warning(f"Failed to record search analytics for {query!r}: {e}")

    # Catalog maintenance

    def add_books(self, books: Iterable[Book]) -> int:
        """Store books in the catalog

        Raises:
            TypeError: If the catalog does not support writes
        """
        add_books = getattr(self.catalog, "add_books", None)
        if add_books is None:
            raise TypeError(f"{type(self.catalog).__name__} does not support adding books")
        return add_books(books)

    def load_file(self, path: str | Path) -> int:
        """Load books from a JSON file into the catalog

        Args:
            path: JSON array of book objects

        Returns:
            Number of books stored
        """
        count = self.add_books(load_records(path))
        logger.info(f"Stored {count} books from {path}")
        return count

    # Lifecycle

    def close(self) -> None:
        """Close the catalog if this facade opened it"""
        if self._owns_catalog and isinstance(self.catalog, SqliteCatalog):
            self.catalog.close()

    def __enter__(self) -> "BookSearchAPI":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
