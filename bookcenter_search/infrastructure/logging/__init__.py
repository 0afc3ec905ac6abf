# bookcenter_search/infrastructure/logging/__init__.py

"""Logging infrastructure for BookCenter search.

This module provides centralized logging configuration and setup.
"""

# Local imports
from bookcenter_search.infrastructure.logging._setup import get_default_log_path
from bookcenter_search.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging", "get_default_log_path"]
