"""
Services for the categorias and estados catalogues.

Besides the CRUD life cycle both catalogues support a lookup by exact
name, which clients use to resolve well-known states such as
``"Activo"`` without hard-coding identifiers.
"""

from typing import Any, Dict, Optional

from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import NotFoundError
from safe_rescue.core.repository import Repository
from safe_rescue.core.validation import check_length, require, require_text
from safe_rescue.registros.db import get_connection
from safe_rescue.registros.schemas.catalogo import CategoriaRead, EstadoRead


class _CatalogoService(CrudService):
    """Shared rules of both catalogue tables."""

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("nombre"), "nombre", 50)
        check_length(values.get("descripcion"), "descripcion", 100)

    @classmethod
    def find_by_nombre(cls, nombre: Optional[str]) -> Any:
        require(nombre, "nombre")
        rows = cls.repository.find_where("nombre = ?", (nombre.strip(),))
        if not rows:
            raise NotFoundError(cls.repository.entity, details={"nombre": nombre})
        return cls.to_read(rows[0])


class CategoriaService(_CatalogoService):
    label = "La categoría"
    read_schema = CategoriaRead
    repository = Repository(
        "categorias",
        "id_categoria",
        ("nombre", "descripcion"),
        get_connection,
        "Categoría",
        integrity_message="Error de integridad de datos. El nombre de la categoría ya existe.",
    )


class EstadoService(_CatalogoService):
    label = "El estado"
    read_schema = EstadoRead
    repository = Repository(
        "estados",
        "id_estado",
        ("nombre", "descripcion"),
        get_connection,
        "Estado",
        integrity_message="Error de integridad de datos. El nombre del estado ya existe.",
    )
