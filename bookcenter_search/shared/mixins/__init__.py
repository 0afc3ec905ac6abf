# bookcenter_search/shared/mixins/__init__.py

"""Shared mixins"""

# Local imports
from bookcenter_search.shared.mixins.mixins import ConfigurableMixin

__all__ = ["ConfigurableMixin"]
