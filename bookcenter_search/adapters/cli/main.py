# bookcenter_search/adapters/cli/main.py

"""
BookCenter Search - CLI Main Module

Command-line interface for loading books into a SQLite catalog, searching
it, and getting query suggestions from past searches.

This CLI uses the public API provided by bookcenter_search.
"""

# Standard library imports
from argparse import Namespace
from logging import getLogger
from typing import Sequence

# Third party imports
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Local imports
from bookcenter_search.adapters.api import BookSearchAPI
from bookcenter_search.adapters.cli.parser import create_argument_parser
from bookcenter_search.core.domain.record import ScoredRecord
from bookcenter_search.infrastructure.config import get_config
from bookcenter_search.infrastructure.logging import setup_logging

logger = getLogger(__name__)


def render_results(query: str, results: Sequence[ScoredRecord], console: Console) -> None:
    """Print search results as a table"""
    if not results:
        console.print(f"No books found for [bold]{escape(query)}[/bold]")
        return

    table = Table(title=escape(f"Results for {query!r}"))
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Author")
    table.add_column("Publisher")
    table.add_column("Price", justify="right")
    table.add_column("Score", justify="right")

    for position, scored in enumerate(results, start=1):
        record = scored.record
        price = getattr(record, "price", None)
        table.add_row(
            str(position),
            escape(record.name),
            escape(record.author or ""),
            escape(record.publisher or ""),
            f"{price:.2f}" if price is not None else "",
            f"{scored.score:.2f}",
        )

    console.print(table)


def render_suggestions(partial: str, suggestions: Sequence[str], console: Console) -> None:
    """Print suggestions one per line"""
    if not suggestions:
        console.print(f"No suggestions for [bold]{escape(partial)}[/bold]")
        return
    for suggestion in suggestions:
        console.print(escape(suggestion))


def run_command(args: Namespace, api: BookSearchAPI, console: Console) -> int:
    """Dispatch a parsed subcommand

    Returns:
        Process exit code
    """
    if args.command == "load":
        try:
            count = api.load_file(args.file)
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Could not load {args.file}: {e}")
            console.print(f"[red]Could not load {escape(args.file)}[/red]")
            return 1
        console.print(f"Loaded {count} books")
        return 0

    if args.command == "search":
        render_results(args.query, api.search_scored(args.query, args.limit), console)
        return 0

    if args.command == "suggest":
        render_suggestions(args.partial, api.suggestions(args.partial, args.limit), console)
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point using the public API"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    config = get_config(args.config) if args.config else get_config()

    # Configure logging
    setup_logging(
        log_file=args.log_file,
        log_level=args.log_level or config.logging.log_level,
        silent=args.silent,
        disable_file_logging=args.disable_file_logging,
    )

    console = Console()
    with BookSearchAPI(config_path=args.config, database_path=args.catalog) as api:
        logger.debug(f"Running {args.command!r} against {api.catalog}")
        return run_command(args, api, console)


if __name__ == "__main__":
    raise SystemExit(main())
