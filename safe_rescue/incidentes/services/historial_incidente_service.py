"""Append-only history of incident changes."""

from typing import List, Optional

from safe_rescue.core.repository import Repository
from safe_rescue.core.timestamps import now_iso
from safe_rescue.core.validation import check_length
from safe_rescue.incidentes.db import get_connection
from safe_rescue.incidentes.schemas.incidente import HistorialIncidenteRead

ORDER_BY = "fecha_historial DESC, id_historial DESC"


class HistorialIncidenteService:
    repository = Repository(
        "historial_incidentes",
        "id_historial",
        ("id_incidente", "id_estado_anterior", "id_estado_nuevo", "fecha_historial", "detalle"),
        get_connection,
        "Historial de incidente",
    )

    @classmethod
    def find_all(cls) -> List[HistorialIncidenteRead]:
        return [HistorialIncidenteRead.model_validate(dict(row)) for row in cls.repository.find_all(ORDER_BY)]

    @classmethod
    def find_by_incidente(cls, id_incidente: int) -> List[HistorialIncidenteRead]:
        rows = cls.repository.find_where("id_incidente = ?", (id_incidente,), order_by=ORDER_BY)
        return [HistorialIncidenteRead.model_validate(dict(row)) for row in rows]

    @classmethod
    def registrar(
        cls,
        id_incidente: int,
        id_estado_anterior: Optional[int],
        id_estado_nuevo: Optional[int],
        detalle: str,
    ) -> int:
        check_length(detalle, "detalle", 250)
        return cls.repository.insert(
            {
                "id_incidente": id_incidente,
                "id_estado_anterior": id_estado_anterior,
                "id_estado_nuevo": id_estado_nuevo,
                "fecha_historial": now_iso(),
                "detalle": detalle,
            }
        )
