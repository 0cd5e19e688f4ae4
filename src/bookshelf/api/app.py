"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookshelf.api.cors import cors_policy
from bookshelf.api.schemas import BookCreate, BookOut, MessageOut, UserCreate, UserOut
from bookshelf.app_logging import configure_logging
from bookshelf.containers import AppContainer
from bookshelf.domain.errors import StoreError

BAD_REQUEST_MESSAGE = "Bad request"
STORE_ERROR_MESSAGE = "Something went wrong"
UPDATED_MESSAGE = "Updated successfully"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        failed = app.state.container.initialize_schema()
        if failed:
            logger.warning(
                "Continuing startup without tables: %s", ", ".join(failed)
            )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Bookshelf API", lifespan=lifespan)
    app.state.container = container
    app.middleware("http")(cors_policy)

    @app.exception_handler(RequestValidationError)
    async def bad_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning(
            "Rejected %s %s: %s", request.method, request.url.path, exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": BAD_REQUEST_MESSAGE},
        )

    @app.exception_handler(StoreError)
    async def store_failure(request: Request, exc: StoreError) -> JSONResponse:
        logger.error(
            "Store failure on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": STORE_ERROR_MESSAGE},
        )

    @app.post("/users", status_code=status.HTTP_201_CREATED)
    def create_user(payload: UserCreate, request: Request) -> UserOut:
        """Create a user; the id is assigned by the store."""
        state_container: AppContainer = request.app.state.container
        user = state_container.user_service.create_user(payload.name)
        return UserOut.from_record(user)

    @app.get("/books")
    def list_books(request: Request) -> list[BookOut]:
        """Return every stored book."""
        state_container: AppContainer = request.app.state.container
        return [
            BookOut.from_record(book)
            for book in state_container.book_service.list_books()
        ]

    @app.post("/books", status_code=status.HTTP_201_CREATED)
    def create_book(payload: BookCreate, request: Request) -> BookOut:
        """Create a book; the id is assigned by the store."""
        state_container: AppContainer = request.app.state.container
        book = state_container.book_service.create_book(payload.title, payload.author)
        return BookOut.from_record(book)

    @app.put("/books")
    async def update_books() -> MessageOut:
        """Accept any body and report success without touching the store."""
        return MessageOut(message=UPDATED_MESSAGE)

    @app.delete("/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_book(book_id: str, request: Request) -> Response:
        """Delete a book by id; unknown ids still succeed."""
        state_container: AppContainer = request.app.state.container
        state_container.book_service.delete_book(book_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app
