# bookcenter_search/infrastructure/persistence/_record_loader.py

"""Loader for book records stored as a JSON array"""

# Standard library imports
import json
from logging import getLogger
from pathlib import Path
from uuid import uuid4

# Local imports
from bookcenter_search.core.domain.record import Book
from bookcenter_search.core.types.json import JSONDict
from bookcenter_search.infrastructure.persistence._sqlite_catalog import now_millis

logger = getLogger(__name__)


def _with_defaults(item: JSONDict, timestamp: int) -> JSONDict:
    """Fill in the id and timestamps a new book gets on insert"""
    filled = dict(item)
    if not filled.get("id"):
        filled["id"] = f"book_{timestamp}_{uuid4().hex[:9]}"
    # Explicit nulls count as missing
    if filled.get("created_at") is None:
        filled["created_at"] = timestamp
    if filled.get("updated_at") is None:
        filled["updated_at"] = filled["created_at"]
    return filled


def load_records(path: Path | str) -> list[Book]:
    """Load books from a JSON file

    The file must hold a JSON array of objects with at least a "name".
    Missing ids are generated and missing timestamps default to now.

    Args:
        path: JSON file path

    Returns:
        Validated books in file order

    Raises:
        ValueError: If the file does not contain a JSON array of objects
        pydantic.ValidationError: If an object is not a valid book
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of books in {path}")

    timestamp = now_millis()
    books = []
    for position, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Entry {position} in {path} is not an object")
        books.append(Book.model_validate(_with_defaults(item, timestamp)))

    logger.info(f"Loaded {len(books)} books from {path}")
    return books
