# bookcenter_search/infrastructure/persistence/__init__.py

"""Persistence infrastructure for the book catalog.

This module provides the catalog implementations the search core reads
candidates from, the search analytics store, and a JSON record loader.
"""

# Local imports
from bookcenter_search.infrastructure.persistence._memory_catalog import InMemoryCatalog
from bookcenter_search.infrastructure.persistence._record_loader import load_records
from bookcenter_search.infrastructure.persistence._sqlite_catalog import SqliteCatalog

__all__ = ["InMemoryCatalog", "SqliteCatalog", "load_records"]
