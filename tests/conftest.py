"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool

from bookshelf.config import Settings
from bookshelf.containers import AppContainer
from bookshelf.domain.errors import StoreError
from bookshelf.domain.models import Book, User
from bookshelf.services.books import BookRepository, BookService
from bookshelf.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: list[User] = field(default_factory=list)

    def create_user(self, name: str | None) -> User:
        user = User(id=len(self.users) + 1, name=name)
        self.users.append(user)
        return user


@dataclass
class InMemoryBookRepository(BookRepository):
    """In-memory book repository that hands out ids like a serial column."""

    books: dict[int, Book] = field(default_factory=dict)
    deleted: list[int] = field(default_factory=list)
    next_id: int = 1

    def create_book(self, title: str, author: str) -> Book:
        book = Book(id=self.next_id, title=title, author=author)
        self.books[book.id] = book
        self.next_id += 1
        return book

    def list_books(self) -> list[Book]:
        return list(self.books.values())

    def delete_book(self, book_id: str | int) -> None:
        try:
            key = int(book_id)
        except ValueError as exc:
            raise StoreError(f"invalid integer: {book_id!r}") from exc
        self.deleted.append(key)
        self.books.pop(key, None)


class FailingUserRepository(UserRepository):
    """User repository whose store is unreachable."""

    def create_user(self, name: str | None) -> User:
        raise StoreError("connection refused")


class FailingBookRepository(BookRepository):
    """Book repository whose store is unreachable."""

    def create_book(self, title: str, author: str) -> Book:
        raise StoreError("connection refused")

    def list_books(self) -> list[Book]:
        raise StoreError("connection refused")

    def delete_book(self, book_id: str | int) -> None:
        raise StoreError("connection refused")


@dataclass
class LifecycleRecorder:
    """Records schema initialisation and shutdown calls."""

    failed_tables: list[str] = field(default_factory=list)
    schema_calls: int = 0
    closed: bool = False

    def initialize_schema(self) -> list[str]:
        self.schema_calls += 1
        return list(self.failed_tables)

    async def close_resources(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        db_user="bookshelf",
        db_password="secret",
        db_host="db.test",
        db_port=5432,
        db_name="bookshelf",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def book_repository() -> InMemoryBookRepository:
    return InMemoryBookRepository()


@pytest.fixture
def lifecycle() -> LifecycleRecorder:
    return LifecycleRecorder()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    book_repository: InMemoryBookRepository,
    lifecycle: LifecycleRecorder,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        book_service=BookService(book_repository),
        initialize_schema=lifecycle.initialize_schema,
        close_resources=lifecycle.close_resources,
    )


@pytest.fixture
def failing_container(
    settings: Settings, lifecycle: LifecycleRecorder
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=UserService(FailingUserRepository()),
        book_service=BookService(FailingBookRepository()),
        initialize_schema=lifecycle.initialize_schema,
        close_resources=lifecycle.close_resources,
    )


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    """Single-connection in-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    yield engine
    engine.dispose()
