"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from sqlalchemy import Engine, create_engine

from bookshelf.adapters.schema import initialize_schema
from bookshelf.adapters.sql_book_repository import SqlBookRepository
from bookshelf.adapters.sql_user_repository import SqlUserRepository
from bookshelf.config import Settings
from bookshelf.services.books import BookService
from bookshelf.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    book_service: BookService
    initialize_schema: Callable[[], list[str]]
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, engine: Engine | None = None
) -> AppContainer:
    """Create the default dependency container.

    The engine is created lazily by SQLAlchemy; no connection is opened
    until the first statement runs.
    """
    resolved_settings = settings or Settings()
    resolved_engine = engine or create_engine(
        resolved_settings.database_url(), pool_pre_ping=True
    )
    user_service = UserService(SqlUserRepository(resolved_engine))
    book_service = BookService(SqlBookRepository(resolved_engine))

    def ensure_schema() -> list[str]:
        return initialize_schema(resolved_engine)

    async def close_resources() -> None:
        resolved_engine.dispose()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        book_service=book_service,
        initialize_schema=ensure_schema,
        close_resources=close_resources,
    )
