# bookcenter_search/infrastructure/persistence/_sqlite_catalog.py

"""SQLite-backed catalog with the indexed lookup and search analytics tables"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from sqlite3 import Connection
from sqlite3 import Row
from sqlite3 import connect
from time import time
from typing import Iterable
from uuid import uuid4

# Local imports
from bookcenter_search.core.domain.record import Book

logger = getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS books (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    price REAL NOT NULL DEFAULT 0,
    author TEXT,
    publisher TEXT,
    notes TEXT,
    created_at INTEGER NOT NULL,
    updated_at INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS search_queries (
    id TEXT PRIMARY KEY,
    query TEXT NOT NULL,
    results_count INTEGER NOT NULL,
    created_at INTEGER NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_books_name ON books(name);
CREATE INDEX IF NOT EXISTS idx_books_author ON books(author);
CREATE INDEX IF NOT EXISTS idx_books_updated ON books(updated_at);
CREATE INDEX IF NOT EXISTS idx_search_queries_created ON search_queries(created_at);
"""

BOOK_COLUMNS = "id, name, price, author, publisher, notes, created_at, updated_at"

# py_lower() keeps case folding identical to str.lower(); SQLite's LOWER() is ASCII-only.
# instr() instead of LIKE keeps % and _ in queries literal.
INDEXED_LOOKUP_SQL = f"""
SELECT {BOOK_COLUMNS} FROM books
WHERE instr(py_lower(name), :needle) > 0
   OR instr(py_lower(author), :needle) > 0
   OR instr(py_lower(publisher), :needle) > 0
ORDER BY
    CASE
        WHEN py_lower(name) = :needle THEN 1
        WHEN instr(py_lower(name), :needle) = 1 THEN 2
        WHEN instr(py_lower(author), :needle) > 0 THEN 3
        ELSE 4
    END,
    updated_at DESC,
    rowid
"""


def now_millis() -> int:
    """Current time in epoch milliseconds"""
    return int(time() * 1000)


def _py_lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


class SqliteCatalog:
    """Book catalog persisted in SQLite

    Implements both the candidate source used by retrieval and the search
    analytics write path.
    """

    def __init__(self, database_path: str | Path = ":memory:") -> None:
        """Open (and create if needed) the catalog database

        Args:
            database_path: SQLite file path, ":memory:" for a private database
        """
        self.database_path = str(database_path)
        self._connection: Connection = connect(self.database_path)
        self._connection.row_factory = Row
        self._connection.create_function("py_lower", 1, _py_lower, deterministic=True)
        self._connection.execute("PRAGMA foreign_keys = ON")
        self._connection.executescript(SCHEMA)
        logger.debug(f"Opened catalog at {self.database_path}")

    # Book operations

    def add_book(self, book: Book) -> None:
        """Insert or replace a book"""
        self.add_books([book])

    def add_books(self, books: Iterable[Book]) -> int:
        """Insert or replace books in one transaction

        Args:
            books: Books to store

        Returns:
            Number of books written
        """
        rows = [
            (
                book.id,
                book.name,
                book.price,
                book.author,
                book.publisher,
                book.notes,
                book.created_at,
                book.updated_at,
            )
            for book in books
        ]
        with self._connection:
            self._connection.executemany(
                f"INSERT OR REPLACE INTO books ({BOOK_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                rows,
            )
        logger.debug(f"Stored {len(rows)} books")
        return len(rows)

    def get_book(self, book_id: str) -> Book | None:
        """Fetch one book by id"""
        row = self._connection.execute(
            f"SELECT {BOOK_COLUMNS} FROM books WHERE id = ?", (book_id,)
        ).fetchone()
        return self._row_to_book(row) if row is not None else None

    def count_books(self) -> int:
        """Number of books in the catalog"""
        row = self._connection.execute("SELECT COUNT(*) FROM books").fetchone()
        return int(row[0])

    def fetch_all_candidates(self) -> list[Book]:
        """All books, most recently updated first"""
        rows = self._connection.execute(
            f"SELECT {BOOK_COLUMNS} FROM books ORDER BY updated_at DESC, rowid"
        ).fetchall()
        return [self._row_to_book(row) for row in rows]

    def indexed_lookup(self, query: str) -> list[Book]:
        """Case-insensitive substring lookup over name, author and publisher

        Args:
            query: Raw query

        Returns:
            Books ordered exact name, name prefix, author match, other, each
            tier most recently updated first
        """
        rows = self._connection.execute(INDEXED_LOOKUP_SQL, {"needle": query.lower()}).fetchall()
        return [self._row_to_book(row) for row in rows]

    # Analytics

    def record_search(self, query: str, results_count: int) -> None:
        """Append a completed search to the analytics table

        Args:
            query: Raw query
            results_count: Number of results returned to the user
        """
        created_at = now_millis()
        search_id = f"search_{created_at}_{uuid4().hex[:9]}"
        with self._connection:
            self._connection.execute(
                "INSERT INTO search_queries (id, query, results_count, created_at) "
                "VALUES (?, ?, ?, ?)",
                (search_id, query, results_count, created_at),
            )

    def recent_queries(self, limit: int = 1000) -> list[str]:
        """The most recent queries, oldest first

        Args:
            limit: Maximum number of queries

        Returns:
            Up to limit raw queries in the order they were searched
        """
        rows = self._connection.execute(
            "SELECT query FROM search_queries ORDER BY created_at DESC, rowid DESC LIMIT ?",
            (limit,),
        ).fetchall()
        return [row["query"] for row in reversed(rows)]

    # Lifecycle

    def close(self) -> None:
        """Close the database connection"""
        self._connection.close()

    def __enter__(self) -> "SqliteCatalog":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @staticmethod
    def _row_to_book(row: Row) -> Book:
        return Book.model_validate(dict(row))
