# bookcenter_search/adapters/cli/__init__.py

"""CLI adapter for BookCenter search"""

# Local imports
from bookcenter_search.adapters.cli.main import main
from bookcenter_search.adapters.cli.parser import create_argument_parser

__all__ = ["create_argument_parser", "main"]
