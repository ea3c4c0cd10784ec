"""
SQLite helpers shared by every service.

Each service keeps its own database file and declares its schema as an
ordered list of ``(version, sql)`` migrations.  ``apply_migrations``
records applied versions in a ``migrations`` table so that only new
scripts run on startup, then inserts seed rows with ``INSERT OR
IGNORE`` so that restarting a service never duplicates lookup data.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence, Tuple

logger = logging.getLogger(__name__)

Migration = Tuple[int, str]
Seed = Tuple[str, tuple]


def resolve_project_path(path: str) -> str:
    """Return an absolute path for a database file or data directory.

    Absolute paths and the special ``:memory:`` name are returned as
    is; relative paths are resolved against the project root.
    """
    if path == ":memory:" or os.path.isabs(path):
        return path
    base_dir = Path(__file__).resolve().parent.parent.parent
    return str((base_dir / path).resolve())


def get_connection(db_url: str) -> sqlite3.Connection:
    """Open a connection to ``db_url`` with rows addressable by column name.

    Foreign key enforcement is switched on for every connection because
    SQLite leaves it disabled by default; the delete conflict checks of
    the services rely on it.
    """
    conn = sqlite3.connect(resolve_project_path(db_url))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(db_url: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and always close the connection."""
    conn = get_connection(db_url)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def apply_migrations(
    db_url: str,
    migrations: Sequence[Migration],
    seeds: Sequence[Seed] = (),
) -> int:
    """Create the database if needed and apply pending migrations.

    Parameters
    ----------
    db_url : str
        Database file of the service.
    migrations : Sequence[Tuple[int, str]]
        Ordered ``(version, sql)`` pairs.  Append new entries with an
        incremented version; never edit an applied one.
    seeds : Sequence[Tuple[str, tuple]]
        ``(sql, params)`` statements executed after the migrations.

    Returns
    -------
    int
        The schema version after the call.
    """
    with get_cursor(db_url) as cursor:
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in migrations:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                logger.info("Applied migration %s to %s", version, db_url)
                current_version = version

        for sql, params in seeds:
            cursor.execute(sql, params)
    return current_version
