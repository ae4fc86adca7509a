"""
Generic SQLite repository for the entity store.

Subclasses declare the table, its writable columns and the pydantic
schema rows are converted to.  All queries use parameterized
statements; column names only ever come from the class declaration.
Each call opens its own connection and closes it before returning.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import date, datetime
from typing import Any, Callable, Dict, Generic, Iterator, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from supergooalros_api.app.core.db import get_connection
from supergooalros_api.app.core.pagination import Page, SortOrder


R = TypeVar("R", bound=BaseModel)

ConnectionFactory = Callable[[], sqlite3.Connection]


class EntityRepository(Generic[R]):
    """CRUD access to one table keyed by an autoincrement ``id``."""

    table: str = ""
    columns: Tuple[str, ...] = ()
    read_schema: Type[BaseModel] = BaseModel

    def __init__(self, connection_factory: ConnectionFactory = get_connection) -> None:
        self._connect = connection_factory
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    @property
    def sortable_fields(self) -> Tuple[str, ...]:
        return ("id",) + self.columns

    def save(self, entity: BaseModel) -> R:
        """Insert ``entity`` or overwrite the row with the same id.

        Without an id a new row is inserted and the store assigns the
        identifier.  With an id the row is upserted: replaced when it
        exists, inserted under that id otherwise.
        """
        values = self._to_row(entity)
        entity_id = getattr(entity, "id", None)
        conn = self._connect()
        try:
            cursor = conn.cursor()
            if entity_id is None:
                placeholders = ", ".join("?" for _ in self.columns)
                cursor.execute(
                    f"INSERT INTO {self.table} ({', '.join(self.columns)}) VALUES ({placeholders})",
                    tuple(values[c] for c in self.columns),
                )
                entity_id = cursor.lastrowid
                self.logger.info("Inserted %s %s", self.table, entity_id)
            else:
                all_columns = ("id",) + self.columns
                placeholders = ", ".join("?" for _ in all_columns)
                assignments = ", ".join(f"{c} = excluded.{c}" for c in self.columns)
                cursor.execute(
                    f"""
                    INSERT INTO {self.table} ({', '.join(all_columns)}) VALUES ({placeholders})
                    ON CONFLICT(id) DO UPDATE SET {assignments}
                    """,
                    (entity_id,) + tuple(values[c] for c in self.columns),
                )
                self.logger.info("Saved %s %s", self.table, entity_id)
            conn.commit()
            row = cursor.execute(
                f"SELECT * FROM {self.table} WHERE id = ?", (entity_id,)
            ).fetchone()
            return self._row_to_read(row)
        finally:
            conn.close()

    def find_one(self, entity_id: int) -> Optional[R]:
        conn = self._connect()
        try:
            row = conn.execute(
                f"SELECT * FROM {self.table} WHERE id = ?", (entity_id,)
            ).fetchone()
            if row is None:
                return None
            return self._row_to_read(row)
        finally:
            conn.close()

    def find_all(self, page: int, size: int, sort: Optional[SortOrder] = None) -> Page[R]:
        """Return one page of rows ordered by ``sort`` (``id`` ascending by default)."""
        order = [(name, direction) for name, direction in (sort or []) if name in self.sortable_fields]
        if not order:
            order = [("id", "asc")]
        order_by = ", ".join(f"{name} {direction.upper()}" for name, direction in order)
        conn = self._connect()
        try:
            total = conn.execute(f"SELECT COUNT(*) FROM {self.table}").fetchone()[0]
            rows = conn.execute(
                f"SELECT * FROM {self.table} ORDER BY {order_by} LIMIT ? OFFSET ?",
                (size, page * size),
            ).fetchall()
            return Page(items=[self._row_to_read(r) for r in rows], total=total, page=page, size=size)
        finally:
            conn.close()

    def iter_all(self, batch_size: int = 500) -> Iterator[R]:
        """Yield every row in id order, reading ``batch_size`` rows at a time."""
        last_id = None
        while True:
            conn = self._connect()
            try:
                rows = conn.execute(
                    f"SELECT * FROM {self.table} WHERE (? IS NULL OR id > ?) ORDER BY id LIMIT ?",
                    (last_id, last_id, batch_size),
                ).fetchall()
            finally:
                conn.close()
            if not rows:
                return
            for row in rows:
                yield self._row_to_read(row)
            last_id = rows[-1]["id"]

    def delete(self, entity_id: int) -> bool:
        """Delete a row by id.  Returns ``True`` if a row was removed."""
        conn = self._connect()
        try:
            cursor = conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (entity_id,))
            conn.commit()
            if cursor.rowcount:
                self.logger.info("Deleted %s %s", self.table, entity_id)
            return cursor.rowcount > 0
        finally:
            conn.close()

    def count(self) -> int:
        conn = self._connect()
        try:
            return conn.execute(f"SELECT COUNT(*) FROM {self.table}").fetchone()[0]
        finally:
            conn.close()

    def _to_row(self, entity: BaseModel) -> Dict[str, Any]:
        data = entity.model_dump(include=set(self.columns))
        row: Dict[str, Any] = {}
        for column in self.columns:
            value = data.get(column)
            if isinstance(value, bool):
                value = int(value)
            elif isinstance(value, (date, datetime)):
                value = value.isoformat()
            row[column] = value
        return row

    def _row_to_read(self, row: sqlite3.Row) -> R:
        return self.read_schema.model_validate(dict(row))
