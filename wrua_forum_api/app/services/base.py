"""
Shared plumbing for the table-backed services.

``ResourceService`` implements the data-access contract every content
type follows: ``list``, ``get``, ``create``, ``update`` and ``delete``
against a single table.  Subclasses declare their table, the columns
they own, which columns hold JSON text and how rows map to a read
schema; they add entity-specific queries (slug lookup, filters,
mark-as-read) on top.

Services keep no state besides the ``Database`` handle.  Every method
opens its own connection, runs parameterized SQL and closes it.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime
from typing import Any, ClassVar, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel

from ..core.db import Database
from ..core.errors import ConflictError, ForumError
from ..core.utils import new_id, to_utc_iso, utcnow_iso

ReadModel = TypeVar("ReadModel", bound=BaseModel)


class ResourceService(Generic[ReadModel]):
    """Generic CRUD over one table."""

    table: ClassVar[str]
    columns: ClassVar[Tuple[str, ...]]
    json_columns: ClassVar[Dict[str, Any]] = {}
    bool_columns: ClassVar[Tuple[str, ...]] = ()
    nullable_columns: ClassVar[Tuple[str, ...]] = ()
    # Unique columns whose violation is reported as a 409 with this message.
    unique_messages: ClassVar[Dict[str, str]] = {}
    order_by: ClassVar[str] = "created_at DESC, rowid DESC"
    created_column: ClassVar[Optional[str]] = "created_at"
    tracks_updated_at: ClassVar[bool] = False
    read_model: ClassVar[Type[BaseModel]]
    label: ClassVar[str] = "record"

    def __init__(self, db: Database) -> None:
        self.db = db
        self.logger = logging.getLogger(type(self).__module__)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    async def list(self) -> List[ReadModel]:
        """Return every row in the table's default order."""
        return self._select()

    async def get(self, record_id: str) -> Optional[ReadModel]:
        """Return the row with ``record_id`` or ``None``."""
        rows = self._select("id = ?", (record_id,))
        return rows[0] if rows else None

    async def create(self, data: BaseModel, **overrides: Any) -> ReadModel:
        """Insert a new row built from ``data`` and return it.

        ``overrides`` replace or add values after the schema is dumped;
        services use it for derived fields such as slugs.
        """
        values = data.model_dump()
        values.update(overrides)
        record_id = new_id()
        now = utcnow_iso()
        row: Dict[str, Any] = {"id": record_id}
        if self.created_column:
            row[self.created_column] = now
        if self.tracks_updated_at:
            row["updated_at"] = now
        for column in self.columns:
            if column in values:
                row[column] = self._encode(column, values[column])
        names = ", ".join(row)
        placeholders = ", ".join("?" for _ in row)
        self._write(f"INSERT INTO {self.table} ({names}) VALUES ({placeholders})", tuple(row.values()))
        self.logger.info("Created %s %s", self.label, record_id)
        created = await self.get(record_id)
        if created is None:
            raise ForumError(f"{self.label} {record_id} could not be read back after insert")
        return created

    async def update(self, record_id: str, data: BaseModel) -> Optional[ReadModel]:
        """Apply the fields set in ``data`` and return the new row.

        ``None`` is treated as "keep the current value" for columns that
        cannot be null.  Returns ``None`` when ``record_id`` does not exist.
        """
        patch = data.model_dump(exclude_unset=True)
        assignments: Dict[str, Any] = {}
        for column, value in patch.items():
            if column not in self.columns:
                continue
            if value is None and column not in self.nullable_columns:
                continue
            assignments[column] = self._encode(column, value)
        if self.tracks_updated_at:
            assignments["updated_at"] = utcnow_iso()
        if assignments:
            set_clause = ", ".join(f"{column} = ?" for column in assignments)
            affected = self._write(
                f"UPDATE {self.table} SET {set_clause} WHERE id = ?",
                (*assignments.values(), record_id),
            )
            if not affected:
                return None
            self.logger.info("Updated %s %s", self.label, record_id)
        return await self.get(record_id)

    async def delete(self, record_id: str) -> bool:
        """Delete a row.  Missing ids are not an error; returns whether a row went away."""
        affected = self._write(f"DELETE FROM {self.table} WHERE id = ?", (record_id,))
        if affected:
            self.logger.info("Deleted %s %s", self.label, record_id)
        return affected > 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _select(self, where: str = "", params: Sequence[Any] = ()) -> List[ReadModel]:
        query = f"SELECT * FROM {self.table}"
        if where:
            query += f" WHERE {where}"
        query += f" ORDER BY {self.order_by}"
        conn = self.db.connect()
        try:
            rows = conn.execute(query, tuple(params)).fetchall()
            return [self._row_to_read(row) for row in rows]
        finally:
            conn.close()

    def _write(self, sql: str, params: Sequence[Any]) -> int:
        """Run one write statement and return the affected row count.

        Integrity errors on a column listed in ``unique_messages`` become
        ``ConflictError``; any other database error propagates.
        """
        conn = self.db.connect()
        try:
            cursor = conn.execute(sql, tuple(params))
            conn.commit()
            return cursor.rowcount
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            for column, message in self.unique_messages.items():
                if f"{self.table}.{column}" in str(exc):
                    raise ConflictError(message) from exc
            raise
        finally:
            conn.close()

    def _encode(self, column: str, value: Any) -> Any:
        if isinstance(value, datetime):
            return to_utc_iso(value)
        if column in self.json_columns:
            return json.dumps(value if value is not None else self.json_columns[column])
        if column in self.bool_columns:
            return int(bool(value))
        return value

    def _row_to_read(self, row: sqlite3.Row) -> ReadModel:
        """Convert a database row to the service's read schema."""
        data = dict(row)
        for column, default in self.json_columns.items():
            raw = data.get(column)
            if raw is None:
                data[column] = type(default)()
                continue
            try:
                data[column] = json.loads(raw)
            except (TypeError, json.JSONDecodeError):
                self.logger.warning("Unreadable JSON in %s.%s for %s", self.table, column, data.get("id"))
                data[column] = type(default)()
        for column in self.bool_columns:
            data[column] = bool(data[column])
        return self.read_model(**data)  # type: ignore[return-value]
