"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager that commits on
success (``get_cursor``) and schema creation on application start
(``init_db``).  Every connection is opened per operation and closed
afterwards, so there is no shared connection state between requests.

Any ``sqlite3.Error`` raised while connecting or executing statements
is re-raised as :class:`StorageUnavailableError`.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings
from .exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)

SQLITE_URL_PREFIX = "sqlite:///"

BOOK_TABLE_SCHEMA = """
CREATE TABLE IF NOT EXISTS book_table (
    id INTEGER PRIMARY KEY,
    title TEXT,
    author TEXT,
    publisher TEXT,
    year INTEGER,
    genre TEXT
);
"""


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    A leading ``sqlite:///`` is stripped from ``settings.database_url``.
    Absolute paths are used as is; relative paths are resolved against
    the project root.
    """
    db_url = settings.database_url
    if db_url.startswith(SQLITE_URL_PREFIX):
        db_url = db_url[len(SQLITE_URL_PREFIX):]
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parents[3]
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.
    """
    db_path = get_database_path()
    try:
        conn = sqlite3.connect(db_path)
    except sqlite3.Error as exc:
        logger.error("Cannot open database %s: %s", db_path, exc)
        raise StorageUnavailableError(f"Cannot open database {db_path}") from exc
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block exits normally, so a
    successful return from a write means the change is on disk.
    """
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    except sqlite3.Error as exc:
        logger.error("Database operation failed: %s", exc)
        raise StorageUnavailableError(str(exc)) from exc
    finally:
        conn.close()


def init_db() -> None:
    """Create the ``book_table`` table if it does not exist yet."""
    with get_cursor() as cursor:
        cursor.executescript(BOOK_TABLE_SCHEMA)
    logger.info("Database ready at %s", get_database_path())
