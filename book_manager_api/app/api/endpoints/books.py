"""
Book endpoints.

These routes expose CRUD operations over book records for the
browser frontend.  Lookups and updates of an unknown id answer
HTTP 200 with a JSON ``null`` body rather than 404, which is what the
frontend expects.  Deletion is idempotent and answers with a plain
text confirmation.

Handlers are plain functions so FastAPI runs the blocking SQLite calls
in its threadpool.  They do not catch storage errors; those surface as
HTTP 500.
"""

from typing import List, Optional

from fastapi import APIRouter, Path
from fastapi.responses import PlainTextResponse

from book_manager_api.app.schemas.book import INT32_MAX, INT32_MIN, Book
from book_manager_api.app.services.book_service import BookService

router = APIRouter()


# ``/all`` must be registered before ``/{book_id}`` so it is not parsed
# as an id.
@router.get("/all", response_model=List[Book])
def get_all_books() -> List[Book]:
    """Return every book; an empty list when there are none."""
    return BookService.get_all_books()


@router.get("/{book_id}", response_model=Optional[Book])
def get_book_by_id(book_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX)) -> Optional[Book]:
    """Retrieve a single book by id, or ``null`` if it does not exist."""
    return BookService.get_book_by_id(book_id)


@router.post("/add", response_model=Book)
def add_book(book: Book) -> Book:
    """Insert a book, overwriting any existing book with the same id."""
    return BookService.add_book(book)


@router.put("/update/{book_id}", response_model=Optional[Book])
def update_book(book: Book, book_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX)) -> Optional[Book]:
    """Update title, author, publisher, year and genre of a book.

    The id in the path wins over any id in the body.  Returns ``null``
    without writing anything if the book does not exist.
    """
    return BookService.update_book(book_id, book)


@router.delete("/delete/{book_id}", response_class=PlainTextResponse)
def delete_book(book_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX)) -> str:
    """Delete a book by id.  Deleting a missing id succeeds as well."""
    BookService.delete_book_by_id(book_id)
    return f"Book deleted with id {book_id}"
