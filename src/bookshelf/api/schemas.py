"""Pydantic models for request and response bodies."""

from pydantic import BaseModel, ConfigDict

from bookshelf.domain.models import Book, User


class UserCreate(BaseModel):
    """Body of ``POST /users``. A client-supplied id is ignored."""

    model_config = ConfigDict(extra="forbid")

    id: int | None = None
    name: str | None = None


class BookCreate(BaseModel):
    """Body of ``POST /books``. A client-supplied id is ignored."""

    model_config = ConfigDict(extra="forbid")

    id: int | None = None
    title: str
    author: str


class UserOut(BaseModel):
    """User as returned to clients."""

    id: int
    name: str | None

    @classmethod
    def from_record(cls, user: User) -> "UserOut":
        return cls(id=user.id, name=user.name)


class BookOut(BaseModel):
    """Book as returned to clients."""

    id: int
    title: str | None
    author: str | None

    @classmethod
    def from_record(cls, book: Book) -> "BookOut":
        return cls(id=book.id, title=book.title, author=book.author)


class MessageOut(BaseModel):
    """Generic ``{"message": ...}`` body."""

    message: str
