"""
Entity store: the SQLite file holding absences and conges.

It is the system of record; ``search_index`` only mirrors it and can
be rebuilt from it with the reindex command.  Repositories open a
connection per call through ``get_connection``.  ``init_db`` runs on
application start and applies the entries of ``MIGRATIONS`` whose
version is above the highest one recorded in the ``migrations`` table.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

from .config import settings


logger = logging.getLogger(__name__)


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS absences (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            start_date TEXT NOT NULL,
            end_date TEXT,
            absence_type TEXT,
            reason TEXT,
            justified INTEGER NOT NULL DEFAULT 0,
            employee_id INTEGER
        );

        CREATE TABLE IF NOT EXISTS conges (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            start_date TEXT NOT NULL,
            end_date TEXT NOT NULL,
            leave_type TEXT NOT NULL,
            day_count INTEGER,
            status TEXT,
            comment TEXT,
            employee_id INTEGER
        );
        """,
    ),
    # Migration 2: lookups by employee are the most common filter used by
    # the front‑end when it opens an employee file.
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_absences_employee ON absences(employee_id);
        CREATE INDEX IF NOT EXISTS idx_conges_employee ON conges(employee_id);
        """,
    ),
]


def resolve_data_path(url: str) -> str:
    """Resolve a SQLite file setting to an absolute path.

    Absolute paths are returned as is.  Relative paths are resolved
    against the project root (the directory containing the
    ``supergooalros_api`` package).
    """
    if os.path.isabs(url):
        return url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / url).resolve())


def get_database_path() -> str:
    """Compute the path to the entity store database file."""
    return resolve_data_path(settings.database_url)


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection to the entity store.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  No type detection is enabled; dates are stored and returned
    as ISO strings and parsed by the pydantic schemas.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor on the entity store for a multi-statement job.

    Used by the migration runner: everything executed through the
    cursor is committed together when the block exits cleanly, and
    discarded with the connection when it raises.
    """
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Create the absence and conge tables, or bring them up to date.

    New schema changes go at the end of ``MIGRATIONS`` with the next
    version number; applied versions are never re-run.
    """
    with get_cursor() as cursor:
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
                logger.info("Applied entity store migration %s", version)
                current_version = version
