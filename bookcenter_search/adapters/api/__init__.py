# bookcenter_search/adapters/api/__init__.py

"""API module for book search

This module provides the high-level facade for searching a book catalog
and serving query suggestions.
"""

# Local imports
from bookcenter_search.adapters.api._search_api import BookSearchAPI

__all__ = ["BookSearchAPI"]
