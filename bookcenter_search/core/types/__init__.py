# bookcenter_search/core/types/__init__.py

"""Type definitions for BookCenter search

This package contains type aliases and protocols used throughout the
codebase. These are pure type definitions with no implementation logic.
"""

# Local imports
from bookcenter_search.core.types.json import JSONDict
from bookcenter_search.core.types.json import JSONList
from bookcenter_search.core.types.json import JSONPrimitive
from bookcenter_search.core.types.json import JSONType
from bookcenter_search.core.types.protocols import CatalogProtocol
from bookcenter_search.core.types.protocols import ScorerProtocol
from bookcenter_search.core.types.protocols import SearchAnalyticsProtocol

__all__ = [
    # JSON types
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    # Protocols
    "CatalogProtocol",
    "ScorerProtocol",
    "SearchAnalyticsProtocol",
]
