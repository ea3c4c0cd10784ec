"""
Generic table access used by the CRUD service classes.

A ``Repository`` knows one table: its name, its primary key and the
columns a client may write.  It runs the parameterized SQL for the
list/get/insert/update/delete pattern and converts SQLite constraint
failures into domain errors:

* a UNIQUE, NOT NULL or FOREIGN KEY failure while inserting or
  updating becomes a ``ValidationError`` carrying a fixed message;
* a FOREIGN KEY failure while deleting (other rows still reference
  the row) becomes a ``ConflictError``.

Column and table names are never taken from request data; they come
from the service definitions only.
"""

import logging
import sqlite3
from typing import Any, Callable, Dict, List, Optional, Sequence

from .exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

INTEGRITY_MESSAGE = "Error de integridad de datos. El registro viola una restricción de unicidad o referencia."
DELETE_CONFLICT_MESSAGE = "No se puede eliminar {entity} porque tiene registros asociados."


class Repository:
    """SQL for one table of a service database.

    Parameters
    ----------
    table : str
        Table name.
    key : str
        Primary key column.
    columns : Sequence[str]
        Writable columns, in insert order.
    connect : Callable[[], sqlite3.Connection]
        Factory returning a new connection to the service database.
    entity : str
        Human readable entity name used in error messages.
    integrity_message : Optional[str]
        Message of the ``ValidationError`` raised on constraint failures.
    """

    def __init__(
        self,
        table: str,
        key: str,
        columns: Sequence[str],
        connect: Callable[[], sqlite3.Connection],
        entity: str,
        integrity_message: Optional[str] = None,
    ) -> None:
        self.table = table
        self.key = key
        self.columns = tuple(columns)
        self.connect = connect
        self.entity = entity
        self.integrity_message = integrity_message or INTEGRITY_MESSAGE

    def find_all(self, order_by: Optional[str] = None) -> List[sqlite3.Row]:
        query = f"SELECT * FROM {self.table} ORDER BY {order_by or self.key + ' ASC'}"
        conn = self.connect()
        try:
            return conn.execute(query).fetchall()
        finally:
            conn.close()

    def find_where(
        self,
        where: str,
        params: Sequence[Any] = (),
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[sqlite3.Row]:
        """Return rows matching a parameterized ``where`` clause."""
        query = f"SELECT * FROM {self.table} WHERE {where} ORDER BY {order_by or self.key + ' ASC'}"
        args = list(params)
        if limit is not None:
            query += " LIMIT ? OFFSET ?"
            args.extend([limit, offset])
        conn = self.connect()
        try:
            return conn.execute(query, args).fetchall()
        finally:
            conn.close()

    def find_by_id(self, entity_id: int) -> Optional[sqlite3.Row]:
        conn = self.connect()
        try:
            return conn.execute(
                f"SELECT * FROM {self.table} WHERE {self.key} = ?",
                (entity_id,),
            ).fetchone()
        finally:
            conn.close()

    def get(self, entity_id: int) -> sqlite3.Row:
        """Return the row or raise ``NotFoundError``."""
        row = self.find_by_id(entity_id)
        if row is None:
            raise NotFoundError(self.entity, entity_id)
        return row

    def exists(self, entity_id: Optional[int]) -> bool:
        if entity_id is None:
            return False
        return self.find_by_id(entity_id) is not None

    def insert_row(self, cursor: sqlite3.Cursor, values: Dict[str, Any]) -> int:
        """Run the INSERT on ``cursor`` without committing.

        Used by services that write several tables in one transaction.
        """
        columns = [c for c in self.columns if c in values]
        placeholders = ", ".join("?" for _ in columns)
        cursor.execute(
            f"INSERT INTO {self.table} ({', '.join(columns)}) VALUES ({placeholders})",
            [values[c] for c in columns],
        )
        return cursor.lastrowid

    def insert(self, values: Dict[str, Any]) -> int:
        """Insert the writable columns present in ``values`` and return the new key."""
        conn = self.connect()
        try:
            new_id = self.insert_row(conn.cursor(), values)
            conn.commit()
        except sqlite3.IntegrityError as exc:
            logger.warning("Insert into %s rejected: %s", self.table, exc)
            raise ValidationError(self.integrity_message) from exc
        finally:
            conn.close()
        logger.info("Created %s %s", self.entity, new_id)
        return new_id

    def update(self, entity_id: int, values: Dict[str, Any]) -> None:
        """Write the writable columns present in ``values`` onto an existing row."""
        columns = [c for c in self.columns if c in values]
        if not columns:
            return
        assignments = ", ".join(f"{c} = ?" for c in columns)
        query = f"UPDATE {self.table} SET {assignments} WHERE {self.key} = ?"
        conn = self.connect()
        try:
            conn.execute(query, [values[c] for c in columns] + [entity_id])
            conn.commit()
        except sqlite3.IntegrityError as exc:
            logger.warning("Update of %s %s rejected: %s", self.table, entity_id, exc)
            raise ValidationError(self.integrity_message) from exc
        finally:
            conn.close()
        logger.info("Updated %s %s", self.entity, entity_id)

    def delete(self, entity_id: int) -> None:
        """Delete a row; raise ``NotFoundError`` or ``ConflictError``."""
        conn = self.connect()
        try:
            cursor = conn.execute(f"DELETE FROM {self.table} WHERE {self.key} = ?", (entity_id,))
            conn.commit()
            affected = cursor.rowcount
        except sqlite3.IntegrityError as exc:
            logger.warning("Delete of %s %s blocked: %s", self.table, entity_id, exc)
            raise ConflictError(DELETE_CONFLICT_MESSAGE.format(entity=self.entity)) from exc
        finally:
            conn.close()
        if not affected:
            raise NotFoundError(self.entity, entity_id)
        logger.info("Deleted %s %s", self.entity, entity_id)
