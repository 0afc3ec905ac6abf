# tests/unit/infrastructure/persistence/test_catalogs.py

"""Tests for the SQLite and in-memory catalogs"""

# Standard library imports
from sqlite3 import ProgrammingError

# Third party imports
import pytest

# Local imports
from bookcenter_search.core.domain.record import Book
from bookcenter_search.infrastructure.persistence import InMemoryCatalog
from bookcenter_search.infrastructure.persistence import SqliteCatalog
from bookcenter_search.infrastructure.persistence._memory_catalog import lookup_tier
from tests.fixtures.records import BookBuilder


def lookup_books() -> list[Book]:
    return [
        BookBuilder.book("The Potter Saga", updated_at=10),
        BookBuilder.book("Potter", updated_at=1),
        BookBuilder.book("Collected Tales", author="Beatrix Potter", updated_at=5),
        BookBuilder.book("Clay Work", publisher="Potter Press", updated_at=20),
        BookBuilder.book("Potter Returns", updated_at=2),
        BookBuilder.book("Potter's Wheel", updated_at=7),
        BookBuilder.book("Unrelated", author="Someone Else", updated_at=99),
    ]


def make_sqlite(books: list[Book]) -> SqliteCatalog:
    catalog = SqliteCatalog()
    catalog.add_books(books)
    return catalog


@pytest.fixture(params=["sqlite", "memory"])
def catalog_factory(request):
    """Build either catalog implementation from a list of books"""
    if request.param == "sqlite":
        return make_sqlite
    return InMemoryCatalog


class TestIndexedLookupContract:
    """Ordering and matching rules shared by both catalogs"""

    def test_tier_ordering(self, catalog_factory):
        catalog = catalog_factory(lookup_books())

        names = [book.name for book in catalog.indexed_lookup("POTTER")]

        assert names == [
            # Exact name
            "Potter",
            # Name prefix, most recently updated first
            "Potter's Wheel",
            "Potter Returns",
            # Author match
            "Collected Tales",
            # Everything else, most recently updated first
            "Clay Work",
            "The Potter Saga",
        ]

    def test_no_match(self, catalog_factory):
        catalog = catalog_factory(lookup_books())
        assert catalog.indexed_lookup("hobbit") == []

    def test_non_ascii_case_folding(self, catalog_factory):
        catalog = catalog_factory([BookBuilder.book("ÉCOLE DES FEMMES")])
        assert [book.name for book in catalog.indexed_lookup("école")] == ["ÉCOLE DES FEMMES"]

    def test_bangla_substring(self, catalog_factory, books):
        catalog = catalog_factory(books)
        assert [book.id for book in catalog.indexed_lookup("বই")] == ["bangla-boi"]

    def test_wildcards_are_literal(self, catalog_factory):
        catalog = catalog_factory(
            [BookBuilder.book("100% Bangla"), BookBuilder.book("Bangla_Boi"), BookBuilder.book("x")]
        )
        assert [book.name for book in catalog.indexed_lookup("%")] == ["100% Bangla"]
        assert [book.name for book in catalog.indexed_lookup("_")] == ["Bangla_Boi"]

    def test_notes_are_not_indexed(self, catalog_factory):
        catalog = catalog_factory([BookBuilder.book("x", notes="potter")])
        assert catalog.indexed_lookup("potter") == []

    def test_full_scan_newest_first(self, catalog_factory):
        catalog = catalog_factory(lookup_books())
        updated = [book.updated_at for book in catalog.fetch_all_candidates()]
        assert updated == sorted(updated, reverse=True)
        assert len(updated) == 7


class TestLookupTier:
    """Test tier classification"""

    def test_tiers(self):
        assert lookup_tier("potter", BookBuilder.book("Potter")) == 1
        assert lookup_tier("potter", BookBuilder.book("Potter Returns")) == 2
        assert lookup_tier("potter", BookBuilder.book("x", author="Potter")) == 3
        assert lookup_tier("potter", BookBuilder.book("x", publisher="Potter")) == 4
        assert lookup_tier("potter", BookBuilder.book("x")) is None


class TestSqliteCatalog:
    """SQLite-specific behavior"""

    def test_add_and_get(self):
        catalog = SqliteCatalog()
        book = BookBuilder.book("গীতাঞ্জলি", author="রবীন্দ্রনাথ ঠাকুর", price=200.5)
        catalog.add_book(book)

        assert catalog.get_book(book.id) == book
        assert catalog.get_book("missing") is None
        assert catalog.count_books() == 1

    def test_add_replaces_same_id(self):
        catalog = SqliteCatalog()
        catalog.add_book(Book(id="b1", name="Old"))
        catalog.add_book(Book(id="b1", name="New"))

        assert catalog.count_books() == 1
        assert catalog.get_book("b1").name == "New"

    def test_absent_fields_round_trip_as_none(self):
        catalog = SqliteCatalog()
        catalog.add_book(Book(id="b1", name="Solo"))
        stored = catalog.get_book("b1")
        assert stored.author is None
        assert stored.notes is None

    def test_persists_to_file(self, temp_test_dir):
        path = temp_test_dir / "catalog.db"
        with SqliteCatalog(path) as catalog:
            catalog.add_book(Book(id="b1", name="The Hobbit"))
            catalog.record_search("hobbit", 1)

        with SqliteCatalog(path) as reopened:
            assert reopened.get_book("b1").name == "The Hobbit"
            assert reopened.recent_queries() == ["hobbit"]

    def test_closed_after_context(self):
        with SqliteCatalog() as catalog:
            pass
        with pytest.raises(ProgrammingError):
            catalog.count_books()


class TestSearchAnalytics:
    """Test the search_queries table"""

    def test_recent_queries_oldest_first(self):
        catalog = SqliteCatalog()
        for query in ("first", "second", "third"):
            catalog.record_search(query, 0)

        assert catalog.recent_queries() == ["first", "second", "third"]
        assert catalog.recent_queries(limit=2) == ["second", "third"]

    def test_results_count_is_stored(self):
        catalog = SqliteCatalog()
        catalog.record_search("বই", 4)
        row = catalog._connection.execute(
            "SELECT query, results_count FROM search_queries"
        ).fetchone()
        assert tuple(row) == ("বই", 4)

    def test_empty_history(self):
        assert SqliteCatalog().recent_queries() == []


class TestInMemoryCatalog:
    """In-memory specific behavior"""

    def test_add_replaces_same_id(self):
        catalog = InMemoryCatalog()
        catalog.add(Book(id="b1", name="Old"))
        catalog.add(Book(id="b1", name="New"))
        assert len(catalog) == 1
        assert catalog.fetch_all_candidates()[0].name == "New"
