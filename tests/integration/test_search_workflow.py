# tests/integration/test_search_workflow.py

"""End-to-end search over a SQLite catalog with mixed Bangla and English books"""

# Standard library imports
from json import dumps

# Third party imports
import pytest

# Local imports
from bookcenter_search import BookSearchAPI
from tests.fixtures.records import sample_books


@pytest.fixture
def catalog_path(temp_test_dir):
    """SQLite catalog file loaded from a JSON export of the sample books"""
    books_path = temp_test_dir / "books.json"
    books_path.write_text(
        dumps([book.model_dump() for book in sample_books()], ensure_ascii=False),
        encoding="utf-8",
    )
    database_path = temp_test_dir / "catalog.db"
    with BookSearchAPI(database_path=database_path) as api:
        api.load_file(books_path)
    return database_path


class TestSearchWorkflow:
    """Full load, search and suggest workflow"""

    def test_exact_english_title(self, catalog_path):
        with BookSearchAPI(database_path=catalog_path) as api:
            results = api.search("The Hobbit")
        assert results[0].id == "hobbit"

    def test_misspelled_title(self, catalog_path):
        with BookSearchAPI(database_path=catalog_path) as api:
            results = api.search("Hary Poter")
        assert [book.id for book in results] == ["potter-1"]

    def test_bangla_query(self, catalog_path):
        with BookSearchAPI(database_path=catalog_path) as api:
            results = api.search("বই")
        assert results[0].id == "bangla-boi"

    def test_latin_spelling_of_bangla_title(self, catalog_path):
        with BookSearchAPI(database_path=catalog_path) as api:
            assert [book.id for book in api.search("kobita")] == ["kobita"]
            assert "bangla-boi" in [book.id for book in api.search("Bangla Boi")]

    def test_indexed_results_keep_catalog_order(self, catalog_path):
        with BookSearchAPI(database_path=catalog_path) as api:
            api.add_books(
                [
                    book.model_copy(update={"id": f"{book.id}-copy-{i}"})
                    for i in range(2)
                    for book in sample_books()
                    if book.id == "hobbit"
                ]
            )
            results = api.search("hobbit")
            assert len(results) == 3
            assert api.coordinator.last_tier == "indexed"

    def test_suggestions_survive_restart(self, catalog_path):
        with BookSearchAPI(database_path=catalog_path) as api:
            api.search("harry potter")
            api.search("harold")
            api.search("hobbit")

        with BookSearchAPI(database_path=catalog_path) as restarted:
            assert restarted.suggestions("har") == ["harry potter", "harold"]
            assert restarted.suggestions("hobit") == ["hobbit"]
