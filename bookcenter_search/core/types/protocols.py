# bookcenter_search/core/types/protocols.py

"""Protocol definitions for the collaborators the search core depends on."""

# Standard library imports
from typing import Protocol
from typing import Sequence

# Local imports
from bookcenter_search.core.domain.record import SearchableRecord

# ============================================================================
# Catalog Protocols
# ============================================================================


class CatalogProtocol(Protocol):
    """Read-only candidate source for retrieval."""

    def fetch_all_candidates(self) -> Sequence[SearchableRecord]: ...

    def indexed_lookup(self, query: str) -> Sequence[SearchableRecord]: ...


class SearchAnalyticsProtocol(Protocol):
    """Write path for query analytics and read path for query history."""

    def record_search(self, query: str, results_count: int) -> None: ...

    def recent_queries(self, limit: int = 1000) -> list[str]: ...


# ============================================================================
# Processing Protocols
# ============================================================================


class ScorerProtocol(Protocol):
    """Scores one record against one query."""

    def score(self, query: str, record: SearchableRecord) -> float: ...


__all__ = ["CatalogProtocol", "SearchAnalyticsProtocol", "ScorerProtocol"]
