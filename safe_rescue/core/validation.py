"""Field checks used by the service classes before anything is persisted."""

from typing import Any, Optional

from .exceptions import ValidationError


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_payload(data: Any, entity: str) -> None:
    """Reject a missing request body before touching the database."""
    if data is None:
        raise ValidationError(f"{entity} no puede ser nulo")


def require(value: Any, field: str) -> None:
    if is_blank(value):
        raise ValidationError(f"El campo '{field}' es obligatorio", field=field)


def check_length(
    value: Optional[str],
    field: str,
    max_length: int,
    min_length: Optional[int] = None,
) -> None:
    """Check the length of an optional text value.

    ``None`` passes; use ``require`` first for mandatory fields.
    """
    if value is None:
        return
    if len(value) > max_length:
        raise ValidationError(
            f"El campo '{field}' no puede superar {max_length} caracteres",
            field=field,
        )
    if min_length is not None and len(value) < min_length:
        raise ValidationError(
            f"El campo '{field}' debe tener al menos {min_length} caracteres",
            field=field,
        )


def require_text(
    value: Optional[str],
    field: str,
    max_length: int,
    min_length: Optional[int] = None,
) -> None:
    require(value, field)
    check_length(value, field, max_length, min_length)
