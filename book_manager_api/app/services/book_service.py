"""
Service layer for book records.

``BookService`` is the seam between the HTTP handlers and
:class:`BookRepository`.  Apart from the update read‑modify‑write it
passes calls straight through; there is no validation, conflict
detection or transaction spanning more than one statement.

Update is not atomic: a delete that lands between the lookup and
the write is undone by the write.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from book_manager_api.app.repositories.book_repository import BookRepository
from book_manager_api.app.schemas.book import Book

logger = logging.getLogger(__name__)


class BookService:
    """Service class for managing books."""

    @classmethod
    def add_book(cls, book: Book) -> Book:
        """Insert ``book`` or fully overwrite the record with the same id."""
        logger.info("Adding book: %s", book.title)
        return BookRepository.save(book)

    @classmethod
    def get_all_books(cls) -> List[Book]:
        return BookRepository.find_all()

    @classmethod
    def get_book_by_id(cls, book_id: int) -> Optional[Book]:
        return BookRepository.find_by_id(book_id)

    @classmethod
    def update_book(cls, book_id: int, details: Book) -> Optional[Book]:
        """Overwrite the mutable fields of the book with ``book_id``.

        ``title``, ``author``, ``publisher``, ``year`` and ``genre`` are
        copied from ``details``; ``details.id`` is ignored.  Returns the
        updated book, or ``None`` without writing if there is no book
        with that id.
        """
        book = BookRepository.find_by_id(book_id)
        if book is None:
            logger.info("Book %s not found, nothing updated", book_id)
            return None
        book.title = details.title
        book.author = details.author
        book.publisher = details.publisher
        book.year = details.year
        book.genre = details.genre
        BookRepository.save(book)
        logger.info("Updated book %s", book_id)
        return book

    @classmethod
    def delete_book_by_id(cls, book_id: int) -> None:
        BookRepository.delete_by_id(book_id)
        logger.info("Deleted book %s", book_id)
