# bookcenter_search/application/services/_suggestion_service.py

"""Autocomplete suggestions from the history of completed searches"""

# Standard library imports
from collections import deque
from logging import getLogger
from threading import Lock
from typing import Iterable

# Local imports
from bookcenter_search.application.processing.string_similarity import field_match_score
from bookcenter_search.application.processing.string_similarity import normalize
from bookcenter_search.application.processing.string_similarity import similarity_ratio
from bookcenter_search.core.domain.query_log import QueryLogEntry
from bookcenter_search.infrastructure.config import ConfigLoader
from bookcenter_search.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


class QuerySuggestionStore(ConfigurableMixin):
    """Bounded FIFO history of normalized queries

    Each store is an independent instance; the coordinator and the caller
    share whichever one they are given. Mutation is guarded by a lock so a
    single store can back several threads.
    """

    def __init__(self, config: ConfigLoader | None = None, max_entries: int | None = None):
        """Initialize an empty store

        Args:
            config: Optional configuration loader
            max_entries: History bound, the configured value if None
        """
        self.config = self._init_config(config)
        suggestions_config = self.config.suggestions

        if max_entries is None:
            max_entries = suggestions_config.max_entries
        self.max_entries = max_entries
        self.default_limit = suggestions_config.default_limit
        self.similarity_threshold = suggestions_config.similarity_threshold

        self._buffer: deque[QueryLogEntry] = deque()
        self._index: set[str] = set()
        self._sequence = 0
        self._lock = Lock()

    def record(self, query: str) -> None:
        """Add a query to the history

        Empty queries and queries already present are ignored. The oldest
        entry is evicted once the bound is exceeded.

        Args:
            query: Raw query
        """
        normalized = normalize(query)
        if not normalized:
            return

        with self._lock:
            if normalized in self._index:
                return

            entry = QueryLogEntry(normalized_query=normalized, sequence=self._sequence)
            self._buffer.append(entry)
            self._index.add(normalized)
            self._sequence += 1

            while len(self._buffer) > self.max_entries:
                evicted = self._buffer.popleft()
                self._index.discard(evicted.normalized_query)

    def load(self, queries: Iterable[str]) -> None:
        """Record queries in order, oldest first

        Args:
            queries: Raw queries, e.g. from the analytics table
        """
        count = 0
        for query in queries:
            self.record(query)
            count += 1
        logger.debug(f"Loaded {count} historical queries, {len(self)} retained")

    def suggest(self, partial_query: str, limit: int | None = None) -> list[str]:
        """Suggest previous queries for a partial query

        Args:
            partial_query: What the user has typed so far
            limit: Maximum suggestions, the configured default if None

        Returns:
            Matching history entries: those starting with the partial query
            first, then by descending match score
        """
        if limit is None:
            limit = self.default_limit

        normalized = normalize(partial_query)
        if not normalized or limit <= 0:
            return []

        with self._lock:
            candidates = [entry.normalized_query for entry in self._buffer]

        matches = [
            candidate
            for candidate in candidates
            if normalized in candidate
            or similarity_ratio(normalized, candidate) > self.similarity_threshold
        ]
        matches.sort(
            key=lambda candidate: (
                not candidate.startswith(normalized),
                -field_match_score(normalized, candidate),
            )
        )

        return matches[:limit]

    def clear(self) -> None:
        """Forget all recorded queries"""
        with self._lock:
            self._buffer.clear()
            self._index.clear()

    @property
    def entries(self) -> list[QueryLogEntry]:
        """Recorded entries, oldest first"""
        with self._lock:
            return list(self._buffer)

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def __contains__(self, query: object) -> bool:
        if not isinstance(query, str):
            return False
        normalized = normalize(query)
        with self._lock:
            return normalized in self._index
