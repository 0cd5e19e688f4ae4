"""SQL-backed user repository."""

from dataclasses import dataclass

from sqlalchemy import Engine, insert
from sqlalchemy.exc import SQLAlchemyError

from bookshelf.adapters.tables import users
from bookshelf.domain.errors import StoreError
from bookshelf.domain.models import User
from bookshelf.services.users import UserRepository


@dataclass
class SqlUserRepository(UserRepository):
    """SQLAlchemy Core implementation for user persistence."""

    engine: Engine

    def create_user(self, name: str | None) -> User:
        """Insert a user row and return it."""
        stmt = insert(users).values(name=name).returning(users.c.id, users.c.name)
        try:
            with self.engine.begin() as conn:
                row = conn.execute(stmt).mappings().one()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to create user") from exc
        return User(id=row["id"], name=row["name"])
