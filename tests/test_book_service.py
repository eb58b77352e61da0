"""Tests for BookService."""

from book_manager_api.app.repositories.book_repository import BookRepository
from book_manager_api.app.schemas.book import Book
from book_manager_api.app.services.book_service import BookService


class TestBookService:
    def test_add_and_get(self, db_path):
        book = Book(id=1, title="A", author="X", publisher="P", year=2020, genre="G")
        assert BookService.add_book(book) == book
        assert BookService.get_book_by_id(1) == book
        assert BookService.get_all_books() == [book]

    def test_add_logs_title(self, db_path, caplog):
        caplog.set_level("INFO", logger="book_manager_api.app.services.book_service")
        BookService.add_book(Book(id=2, title="Logged"))
        assert "Adding book: Logged" in caplog.text

    def test_update_copies_fields_and_keeps_id(self, db_path):
        BookService.add_book(Book(id=5, title="Old", author="A1", year=1990))

        details = Book(id=42, title="New", author="A2", publisher="P2", year=2021, genre="G2")
        updated = BookService.update_book(5, details)

        expected = Book(id=5, title="New", author="A2", publisher="P2", year=2021, genre="G2")
        assert updated == expected
        assert BookRepository.find_by_id(5) == expected
        assert BookRepository.find_by_id(42) is None

    def test_update_missing_returns_none_without_writing(self, db_path):
        assert BookService.update_book(9, Book(id=9, title="Ghost")) is None
        assert BookRepository.find_all() == []

    def test_delete_missing_is_noop(self, db_path):
        BookService.delete_book_by_id(3)
        assert BookService.get_all_books() == []
