"""Domain records for the bookshelf service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A row of the users table."""

    id: int
    name: str | None


@dataclass(frozen=True)
class Book:
    """A row of the books table."""

    id: int
    title: str | None
    author: str | None
