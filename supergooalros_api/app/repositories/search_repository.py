"""
Generic repository over an FTS5 search index table.

Documents are keyed by the record id (the FTS ``rowid``).  Writing a
document replaces any previous version; deleting an unknown id is a
no‑op.  Queries are free text: see :func:`build_fts_query` for how the
raw text is turned into an FTS5 ``MATCH`` expression.
"""

from __future__ import annotations

import json
import logging
import re
import sqlite3
from typing import Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from supergooalros_api.app.core.pagination import Page, SortOrder
from supergooalros_api.app.core.search_index import get_search_connection


R = TypeVar("R", bound=BaseModel)

MAX_QUERY_LENGTH = 500
MAX_QUERY_TOKENS = 20

# A word, optionally followed by ``*`` for a prefix query.
_TOKEN_RE = re.compile(r"(\w+)(\*?)", re.UNICODE)


def is_match_all(raw_query: Optional[str]) -> bool:
    """``*``, an empty or a blank query selects every document."""
    return raw_query is None or raw_query.strip() in {"", "*"}


def build_fts_query(raw_query: str) -> str:
    """Translate free text into an FTS5 ``MATCH`` expression.

    Each word becomes a quoted term (``"word"``, or ``"word"*`` for a
    prefix) and terms are joined with ``OR``.  Operators and punctuation
    in the raw text are dropped, so user input can never produce an
    FTS5 syntax error.  Returns an empty string when nothing usable is
    left.
    """
    terms: List[str] = []
    for word, star in _TOKEN_RE.findall(raw_query[:MAX_QUERY_LENGTH].lower()):
        term = f'"{word}"*' if star else f'"{word}"'
        if term not in terms:
            terms.append(term)
    return " OR ".join(terms[:MAX_QUERY_TOKENS])


def document_text(entity: BaseModel) -> str:
    """Text indexed for ``entity``: every non-null field value, in JSON form."""
    parts: List[str] = []
    for value in entity.model_dump(mode="json").values():
        if value is None:
            continue
        if isinstance(value, bool):
            parts.append("true" if value else "false")
        else:
            parts.append(str(value))
    return " ".join(parts)


class SearchRepository(Generic[R]):
    """Index, de-index and query documents of one record type."""

    index: str = ""
    read_schema: Type[BaseModel] = BaseModel

    def __init__(self, connection_factory: Callable[[], sqlite3.Connection] = get_search_connection) -> None:
        self._connect = connection_factory
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    def save(self, entity: R) -> None:
        """Index ``entity`` under its id, replacing any previous document."""
        conn = self._connect()
        try:
            conn.execute(f"DELETE FROM {self.index} WHERE rowid = ?", (entity.id,))
            conn.execute(
                f"INSERT INTO {self.index} (rowid, content, source) VALUES (?, ?, ?)",
                (entity.id, document_text(entity), entity.model_dump_json()),
            )
            conn.commit()
            self.logger.debug("Indexed %s document %s", self.index, entity.id)
        finally:
            conn.close()

    def delete(self, entity_id: int) -> None:
        conn = self._connect()
        try:
            conn.execute(f"DELETE FROM {self.index} WHERE rowid = ?", (entity_id,))
            conn.commit()
            self.logger.debug("Removed %s document %s", self.index, entity_id)
        finally:
            conn.close()

    def search(self, query: Optional[str], page: int, size: int, sort: Optional[SortOrder] = None) -> Page[R]:
        """Return one page of documents matching ``query``.

        Matches are ordered by relevance (BM25) first; ``sort`` only
        breaks ties between equally relevant documents.  A match-all
        query has no relevance and is ordered by ``sort`` alone.  The id
        is always the last key.
        """
        order_by = self._order_by(sort)
        if is_match_all(query):
            count_sql = f"SELECT COUNT(*) FROM {self.index}"
            select_sql = f"SELECT rowid, source FROM {self.index} ORDER BY {order_by} LIMIT ? OFFSET ?"
            params: tuple = ()
        else:
            fts_query = build_fts_query(query)
            if not fts_query:
                return Page(items=[], total=0, page=page, size=size)
            count_sql = f"SELECT COUNT(*) FROM {self.index} WHERE {self.index} MATCH ?"
            select_sql = (
                f"SELECT rowid, source FROM {self.index} WHERE {self.index} MATCH ? "
                f"ORDER BY bm25({self.index}), {order_by} LIMIT ? OFFSET ?"
            )
            params = (fts_query,)
        conn = self._connect()
        try:
            total = conn.execute(count_sql, params).fetchone()[0]
            rows = conn.execute(select_sql, params + (size, page * size)).fetchall()
        finally:
            conn.close()
        items = [self.read_schema.model_validate(json.loads(row["source"])) for row in rows]
        return Page(items=items, total=total, page=page, size=size)

    def _order_by(self, sort: Optional[SortOrder]) -> str:
        # Field names are checked against the schema before being put in SQL.
        keys: List[str] = []
        for name, direction in sort or []:
            if direction not in {"asc", "desc"}:
                continue
            if name == "id":
                keys.append(f"rowid {direction.upper()}")
                break
            if name in self.read_schema.model_fields:
                keys.append(f"json_extract(source, '$.{name}') {direction.upper()}")
        else:
            keys.append("rowid ASC")
        return ", ".join(keys)

    def count(self) -> int:
        conn = self._connect()
        try:
            return conn.execute(f"SELECT COUNT(*) FROM {self.index}").fetchone()[0]
        finally:
            conn.close()

    def clear(self) -> None:
        """Remove every document from the index."""
        conn = self._connect()
        try:
            conn.execute(f"DELETE FROM {self.index}")
            conn.commit()
            self.logger.info("Cleared search index %s", self.index)
        finally:
            conn.close()
