# bookcenter_search/infrastructure/persistence/_memory_catalog.py

"""In-memory catalog implementing the indexed lookup contract"""

# Standard library imports
from logging import getLogger
from typing import Iterable

# Local imports
from bookcenter_search.core.domain.record import SearchableRecord

logger = getLogger(__name__)

TIER_EXACT_NAME = 1
TIER_NAME_PREFIX = 2
TIER_AUTHOR = 3
TIER_OTHER = 4


def _updated_at(record: SearchableRecord) -> int:
    """Last update time, 0 for records that do not track it"""
    return getattr(record, "updated_at", 0)


def lookup_tier(needle: str, record: SearchableRecord) -> int | None:
    """Priority tier of a record in the indexed lookup

    Args:
        needle: Lowercased query
        record: Candidate record

    Returns:
        1 exact name, 2 name prefix, 3 author substring, 4 other match
        (name, author or publisher substring), None when nothing matches
    """
    name = record.name.lower()
    author = (record.author or "").lower()
    publisher = (record.publisher or "").lower()

    if needle not in name and needle not in author and needle not in publisher:
        return None
    if name == needle:
        return TIER_EXACT_NAME
    if name.startswith(needle):
        return TIER_NAME_PREFIX
    if needle in author:
        return TIER_AUTHOR
    return TIER_OTHER


class InMemoryCatalog:
    """Catalog held in a Python list

    Mirrors SqliteCatalog's lookup ordering for tests and small embedded uses.
    """

    def __init__(self, records: Iterable[SearchableRecord] = ()) -> None:
        """Initialize with records

        Args:
            records: Initial catalog contents
        """
        self._records: list[SearchableRecord] = list(records)

    def add(self, record: SearchableRecord) -> None:
        """Add or replace a record by id"""
        self._records = [existing for existing in self._records if existing.id != record.id]
        self._records.append(record)

    def fetch_all_candidates(self) -> list[SearchableRecord]:
        """All records, most recently updated first"""
        return sorted(self._records, key=_updated_at, reverse=True)

    def indexed_lookup(self, query: str) -> list[SearchableRecord]:
        """Case-insensitive substring lookup over name, author and publisher

        Args:
            query: Raw query

        Returns:
            Matching records by tier, then most recently updated first
        """
        needle = query.lower()
        tiered = []
        for record in self._records:
            tier = lookup_tier(needle, record)
            if tier is not None:
                tiered.append((tier, -_updated_at(record), record))

        tiered.sort(key=lambda item: (item[0], item[1]))
        return [record for _, _, record in tiered]

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["InMemoryCatalog", "lookup_tier"]
