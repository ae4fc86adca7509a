"""
SQLite FTS5 search index.

The search index is a derived copy of the entity store: every created
or updated record is written here as a document and removed on delete.
Each record type has its own FTS5 virtual table with two columns:

``content``
    The text of every field, joined with spaces.  This is what free
    text queries match against.
``source``
    The JSON representation of the record as returned by the API.
    Unindexed; search hits are decoded from it without a round trip to
    the entity store.

The FTS ``rowid`` is the record identifier, so a document can be
replaced or removed by id.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, Tuple

from .config import settings
from .db import resolve_data_path


logger = logging.getLogger(__name__)


# One virtual table per searchable record type.
INDEX_NAMES: Tuple[str, ...] = ("absence_index", "conge_index")

# Diacritics are folded so "conge" matches "congé".
TOKENIZER = "unicode61 remove_diacritics 2"


def get_search_index_path() -> str:
    """Compute the path to the search index database file."""
    return resolve_data_path(settings.search_index_url)


def get_search_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection to the search index."""
    conn = sqlite3.connect(get_search_index_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_search_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor on the index and commits on exit."""
    conn = get_search_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_search_index() -> None:
    """Create the FTS5 tables that do not exist yet.

    Unlike the entity store there is no migration history: the index
    can always be rebuilt from the store, so a schema change is handled
    by dropping the file and running ``reindex.py``.
    """
    with get_search_cursor() as cursor:
        for name in INDEX_NAMES:
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
                (name,),
            )
            if cursor.fetchone() is None:
                cursor.execute(
                    f"CREATE VIRTUAL TABLE {name} USING fts5("
                    f"content, source UNINDEXED, tokenize = '{TOKENIZER}')"
                )
                logger.info("Created search index %s", name)
