"""Service for the append-only historial log."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.timestamps import now_iso
from safe_rescue.core.validation import require, require_text
from safe_rescue.registros.db import get_connection
from safe_rescue.registros.schemas.historial import HistorialRead
from safe_rescue.registros.services.catalogo_service import CategoriaService, EstadoService


class HistorialService(CrudService):
    label = "El historial"
    read_schema = HistorialRead
    order_by = "fecha_historial DESC, id_historial DESC"
    repository = Repository(
        "historial",
        "id_historial",
        ("id_estado", "id_categoria", "detalle", "fecha_historial"),
        get_connection,
        "Historial",
    )

    @classmethod
    def prepare_create(cls, data: BaseModel) -> Dict[str, Any]:
        values = data.model_dump(mode="json")
        values["fecha_historial"] = values.get("fecha_historial") or now_iso()
        return values

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("detalle"), "detalle", 250)
        require(values.get("id_estado"), "id_estado")
        require(values.get("id_categoria"), "id_categoria")
        if not EstadoService.repository.exists(values["id_estado"]):
            raise ValidationError("El estado asociado no existe", field="id_estado")
        if not CategoriaService.repository.exists(values["id_categoria"]):
            raise ValidationError("La categoría asociada no existe", field="id_categoria")

    @classmethod
    def find_by_estado(cls, id_estado: int) -> List[HistorialRead]:
        rows = cls.repository.find_where("id_estado = ?", (id_estado,), order_by=cls.order_by)
        return [cls.to_read(row) for row in rows]
