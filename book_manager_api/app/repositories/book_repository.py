"""
Persistence for book records.

``BookRepository`` maps an integer key to a :class:`Book` stored in
the ``book_table`` SQLite table.  It supports insert‑or‑replace,
lookup by key, full enumeration and idempotent deletion.  Every
method opens its own connection through :func:`get_cursor`, commits
before returning and raises ``StorageUnavailableError`` when the
database cannot be used.

All queries use parameterized statements.
"""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from book_manager_api.app.core.db import get_cursor
from book_manager_api.app.schemas.book import Book


class BookRepository:
    """Key‑addressed access to the ``book_table`` table."""

    @classmethod
    def save(cls, book: Book) -> Book:
        """Write ``book`` keyed by ``book.id``, replacing any prior record."""
        with get_cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO book_table (id, title, author, publisher, year, genre)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    title = excluded.title,
                    author = excluded.author,
                    publisher = excluded.publisher,
                    year = excluded.year,
                    genre = excluded.genre
                """,
                (book.id, book.title, book.author, book.publisher, book.year, book.genre),
            )
        return book

    @classmethod
    def find_by_id(cls, book_id: int) -> Optional[Book]:
        """Return the book with ``book_id`` or ``None`` if there is none."""
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT * FROM book_table WHERE id = ?",
                (book_id,),
            ).fetchone()
        if not row:
            return None
        return cls._row_to_book(row)

    @classmethod
    def find_all(cls) -> List[Book]:
        """Return every stored book in no particular order."""
        with get_cursor() as cursor:
            rows = cursor.execute("SELECT * FROM book_table").fetchall()
        return [cls._row_to_book(row) for row in rows]

    @classmethod
    def delete_by_id(cls, book_id: int) -> None:
        """Delete the book with ``book_id``.  Missing keys are not an error."""
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM book_table WHERE id = ?", (book_id,))

    @staticmethod
    def _row_to_book(row: sqlite3.Row) -> Book:
        """Convert a database row to a Book schema instance."""
        return Book(
            id=row["id"],
            title=row["title"],
            author=row["author"],
            publisher=row["publisher"],
            year=row["year"] if row["year"] is not None else 0,
            genre=row["genre"],
        )
