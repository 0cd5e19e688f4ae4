"""Services for managing the book catalogue."""

from dataclasses import dataclass
from typing import Protocol

from bookshelf.domain.models import Book


class BookRepository(Protocol):
    """Persistence interface for books."""

    def create_book(self, title: str, author: str) -> Book:
        """Insert a book and return it with its store-assigned id."""

    def list_books(self) -> list[Book]:
        """Return every stored book in storage order."""

    def delete_book(self, book_id: str | int) -> None:
        """Delete the book with the given id, if any.

        Raises ``StoreError`` when the id is not an integer key.
        """


@dataclass
class BookService:
    """Application service for book operations."""

    repository: BookRepository

    def create_book(self, title: str, author: str) -> Book:
        """Create a book entry."""
        return self.repository.create_book(title, author)

    def list_books(self) -> list[Book]:
        """Return all books."""
        return self.repository.list_books()

    def delete_book(self, book_id: str | int) -> None:
        """Delete a book.

        Deleting an id that does not exist is not an error, so callers
        cannot tell a removed row from a missing one.
        """
        self.repository.delete_book(book_id)
