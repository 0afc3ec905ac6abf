# bookcenter_search/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from bookcenter_search.infrastructure.config import get_config


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options"""
    # Load default configuration
    config = get_config()
    suggestions_config = config.suggestions
    retrieval_config = config.retrieval

    parser = ArgumentParser(
        prog="bookcenter-search",
        description="Search a bilingual (Bangla/English) book catalog",
    )

    # Configuration and data
    parser.add_argument("--config", default=None, help="Path to configuration JSON file")
    parser.add_argument(
        "--catalog",
        default=None,
        help=f"Path to the SQLite catalog (default: {config.catalog.database_path})",
    )

    # Logging options
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help=f"Console log level (default: {config.logging.log_level})",
    )
    parser.add_argument(
        "--log-file",
        default=config.logging.log_file,
        help="Path to log file (default: logs/bookcenter_search_[timestamp].log)",
    )
    # File logging is enabled by default, so use store_true to disable it
    parser.add_argument("--disable-file-logging", action="store_true", help="Disable file logging")
    parser.add_argument("--silent", action="store_true", help="Suppress log output on the console")

    subparsers = parser.add_subparsers(dest="command", required=True)

    load_parser = subparsers.add_parser("load", help="Add books from a JSON file to the catalog")
    load_parser.add_argument("file", help="JSON array of book objects")

    search_parser = subparsers.add_parser("search", help="Search the catalog")
    search_parser.add_argument("query", help="Search query, Bangla or English")
    search_parser.add_argument(
        "--limit",
        type=int,
        default=retrieval_config.max_results,
        help=f"Maximum results to show (default: {retrieval_config.max_results})",
    )

    suggest_parser = subparsers.add_parser("suggest", help="Suggest queries from search history")
    suggest_parser.add_argument("partial", help="Partially typed query")
    suggest_parser.add_argument(
        "--limit",
        type=int,
        default=suggestions_config.default_limit,
        help=f"Maximum suggestions (default: {suggestions_config.default_limit})",
    )

    return parser
