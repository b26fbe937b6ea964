"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``) and a cursor context manager used by the repository.
Every function accepts an optional explicit database path so tests can
point at a temporary file; by default the path comes from settings.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: ship table
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS ship (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            planet TEXT NOT NULL,
            ship_type TEXT NOT NULL,
            prod_date INTEGER NOT NULL,
            is_used INTEGER NOT NULL DEFAULT 0,
            speed REAL NOT NULL,
            crew_size INTEGER NOT NULL,
            rating REAL NOT NULL
        );
        """,
    ),
    # Migration 2: indices on the columns used for ordering
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_ship_speed ON ship(speed);
        CREATE INDEX IF NOT EXISTS idx_ship_prod_date ON ship(prod_date);
        CREATE INDEX IF NOT EXISTS idx_ship_rating ON ship(rating);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured value is an absolute path (or the special
    ``:memory:`` name), use it directly.  Otherwise resolve it relative
    to the project root.
    """
    db_url = database_url or settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects so columns can be
    accessed by name.
    """
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block finishes without an
    exception and rolled back otherwise.
    """
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any migration in ``MIGRATIONS``
    with a higher version number.
    """
    with get_cursor(db_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
