"""SQL implementation for the book catalogue."""

from collections.abc import Mapping
from dataclasses import dataclass

from sqlalchemy import Engine, delete, insert, select
from sqlalchemy.exc import SQLAlchemyError

from bookshelf.adapters.tables import books
from bookshelf.domain.errors import StoreError
from bookshelf.domain.models import Book
from bookshelf.services.books import BookRepository


@dataclass
class SqlBookRepository(BookRepository):
    """SQLAlchemy Core repository for books."""

    engine: Engine

    def create_book(self, title: str, author: str) -> Book:
        """Insert a book and return it with the generated id."""
        stmt = insert(books).values(title=title, author=author).returning(books.c.id)
        try:
            with self.engine.begin() as conn:
                book_id = conn.execute(stmt).scalar_one()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to create book") from exc
        return Book(id=book_id, title=title, author=author)

    def list_books(self) -> list[Book]:
        """Return every book in storage order."""
        stmt = select(books.c.id, books.c.title, books.c.author)
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
                return [_parse_book(row) for row in rows]
        except (SQLAlchemyError, KeyError, TypeError, ValueError) as exc:
            raise StoreError("Failed to list books") from exc

    def delete_book(self, book_id: str | int) -> None:
        """Delete the book with the given id; a missing id is a no-op.

        The id arrives as the raw path segment. A value that cannot be
        read as an integer key fails like any other statement error.
        """
        try:
            key = int(book_id)
        except (TypeError, ValueError) as exc:
            raise StoreError(f"Invalid book id {book_id!r}") from exc
        stmt = delete(books).where(books.c.id == key)
        try:
            with self.engine.begin() as conn:
                conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to delete book {key}") from exc


def _parse_book(row: Mapping[str, object]) -> Book:
    """Parse a books row into a domain record."""
    return Book(
        id=int(row["id"]),
        title=row["title"],
        author=row["author"],
    )
