"""Startup schema creation."""

import logging

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from bookshelf.adapters.tables import books, users

logger = logging.getLogger(__name__)


def initialize_schema(engine: Engine) -> list[str]:
    """Create the users and books tables if they do not exist yet.

    Each table is attempted on its own. A failure is logged and the
    remaining tables are still tried; the names of the tables that could
    not be created are returned.
    """
    failed: list[str] = []
    for table in (users, books):
        try:
            table.create(engine, checkfirst=True)
        except SQLAlchemyError:
            logger.exception("Failed to create table %s", table.name)
            failed.append(table.name)
    return failed
