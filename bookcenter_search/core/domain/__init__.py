# bookcenter_search/core/domain/__init__.py

"""Core domain entities"""

# Local imports
from bookcenter_search.core.domain.errors import RetrievalError
from bookcenter_search.core.domain.query_log import QueryLogEntry
from bookcenter_search.core.domain.record import Book
from bookcenter_search.core.domain.record import ScoredRecord
from bookcenter_search.core.domain.record import SearchableRecord

__all__ = ["Book", "QueryLogEntry", "RetrievalError", "ScoredRecord", "SearchableRecord"]
