"""Console entrypoint that serves the API with uvicorn."""

import logging

import uvicorn
from fastapi import FastAPI

from bookshelf.api.app import create_app
from bookshelf.app_logging import configure_logging
from bookshelf.config import Settings, env_file_present
from bookshelf.containers import build_container

BANNER = "Welcome to book app!"


def build_app(settings: Settings | None = None) -> FastAPI:
    """Build the application from environment settings.

    Usable directly as ``uvicorn --factory bookshelf.main:build_app``.
    """
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    if not env_file_present(resolved_settings):
        logging.getLogger(__name__).info(
            "No .env file found; using process environment only"
        )
    return create_app(build_container(resolved_settings))


def main() -> None:
    """Print the banner and serve the API until interrupted."""
    print(BANNER)  # noqa: T201
    settings = Settings()
    app = build_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
