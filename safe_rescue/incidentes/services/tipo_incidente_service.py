"""Service for incident types."""

from typing import Any, Dict, Optional

from safe_rescue.core.crud import CrudService
from safe_rescue.core.repository import Repository
from safe_rescue.core.validation import require_text
from safe_rescue.incidentes.db import get_connection
from safe_rescue.incidentes.schemas.incidente import TipoIncidenteRead


class TipoIncidenteService(CrudService):
    label = "El tipo de incidente"
    read_schema = TipoIncidenteRead
    repository = Repository(
        "tipos_incidente",
        "id_tipo_incidente",
        ("nombre",),
        get_connection,
        "Tipo de incidente",
        integrity_message="Error de integridad de datos. El nombre del tipo de incidente ya existe.",
    )

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("nombre"), "nombre", 50)
