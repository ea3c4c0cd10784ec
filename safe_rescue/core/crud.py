"""
Base class for the CRUD service classes.

Every entity of every SAFE-Rescue service follows the same life cycle:

* ``find_all`` lists rows (an empty list is a valid answer);
* ``find_by_id`` raises ``NotFoundError`` for an unknown id;
* ``save`` rejects a missing payload, validates the values, inserts
  and returns the stored row;
* ``update`` loads the row, copies only the fields present in the
  payload, validates the merged values and persists them;
* ``delete`` removes the row or reports a conflict when other rows
  still reference it.

Subclasses declare a ``repository`` and a ``read_schema`` and
override ``validate`` (and optionally ``on_updated``) with the rules of
their entity.
"""

import sqlite3
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel

from .repository import Repository
from .validation import require_payload


class CrudService:
    repository: Repository
    read_schema: Type[BaseModel]
    # Subject used in "<label> no puede ser nulo".
    label: str = "El registro"
    order_by: Optional[str] = None

    @classmethod
    def find_all(cls) -> List[Any]:
        return [cls.to_read(row) for row in cls.repository.find_all(cls.order_by)]

    @classmethod
    def find_by_id(cls, entity_id: int) -> Any:
        return cls.to_read(cls.repository.get(entity_id))

    @classmethod
    def save(cls, data: Optional[BaseModel]) -> Any:
        require_payload(data, cls.label)
        values = cls.prepare_create(data)
        cls.validate(values)
        new_id = cls.repository.insert(values)
        return cls.find_by_id(new_id)

    @classmethod
    def update(cls, entity_id: int, data: Optional[BaseModel]) -> Any:
        require_payload(data, cls.label)
        current = dict(cls.repository.get(entity_id))
        merged = {**current, **data.model_dump(mode="json", exclude_unset=True)}
        cls.validate(merged, entity_id=entity_id)
        cls.repository.update(entity_id, merged)
        cls.on_updated(entity_id, current, merged)
        return cls.find_by_id(entity_id)

    @classmethod
    def delete(cls, entity_id: int) -> None:
        cls.repository.delete(entity_id)

    @classmethod
    def prepare_create(cls, data: BaseModel) -> Dict[str, Any]:
        """Values to insert for a create payload."""
        return data.model_dump(mode="json")

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        """Raise ``ValidationError`` when ``values`` break an entity rule."""

    @classmethod
    def reference_changed(cls, values: Dict[str, Any], entity_id: Optional[int], field: str) -> bool:
        """Whether ``field`` has to be looked up again.

        Always true for a new row; on update only when the value differs
        from the stored one, so unchanged remote ids are not re-fetched.
        """
        if entity_id is None:
            return True
        return values.get(field) != cls.repository.get(entity_id)[field]

    @classmethod
    def on_updated(cls, entity_id: int, previous: Dict[str, Any], current: Dict[str, Any]) -> None:
        """Hook run after a successful update (audit rows and the like)."""

    @classmethod
    def to_read(cls, row: sqlite3.Row) -> Any:
        return cls.read_schema.model_validate(dict(row))
