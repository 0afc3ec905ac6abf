# bookcenter_search/application/services/__init__.py

"""Application services orchestrating retrieval and suggestions"""

# Local imports
from bookcenter_search.application.services._retrieval_service import RetrievalCoordinator
from bookcenter_search.application.services._suggestion_service import QuerySuggestionStore

__all__ = ["QuerySuggestionStore", "RetrievalCoordinator"]
