"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from bookshelf.domain.models import User


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, name: str | None) -> User:
        """Insert a user and return it with its store-assigned id."""


@dataclass
class UserService:
    """Application service for user actions."""

    repository: UserRepository

    def create_user(self, name: str | None) -> User:
        """Create a user with the given name."""
        return self.repository.create_user(name)
