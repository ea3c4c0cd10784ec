"""Append-only history of message and notification state changes."""

from typing import List, Optional

from safe_rescue.comunicacion.db import get_connection
from safe_rescue.comunicacion.schemas.mensaje import HistorialMensajeRead
from safe_rescue.core.exceptions import ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.timestamps import now_iso
from safe_rescue.core.validation import check_length

ORDER_BY = "fecha_historial DESC, id_historial_mensaje DESC"


class HistorialMensajeService:
    repository = Repository(
        "historial_mensajes",
        "id_historial_mensaje",
        (
            "id_mensaje",
            "id_notificacion",
            "id_estado_anterior",
            "id_estado_nuevo",
            "detalle",
            "fecha_historial",
        ),
        get_connection,
        "Historial de mensaje",
    )

    @classmethod
    def find_all(cls) -> List[HistorialMensajeRead]:
        return [cls._to_read(row) for row in cls.repository.find_all(ORDER_BY)]

    @classmethod
    def find_by_mensaje(cls, id_mensaje: int) -> List[HistorialMensajeRead]:
        rows = cls.repository.find_where("id_mensaje = ?", (id_mensaje,), order_by=ORDER_BY)
        return [cls._to_read(row) for row in rows]

    @classmethod
    def registrar(
        cls,
        id_estado_anterior: int,
        id_estado_nuevo: int,
        detalle: Optional[str] = None,
        id_mensaje: Optional[int] = None,
        id_notificacion: Optional[int] = None,
    ) -> HistorialMensajeRead:
        """Append one transition for either a message or a notification."""
        if (id_mensaje is None) == (id_notificacion is None):
            raise ValidationError("El historial debe referir a un mensaje o a una notificación")
        check_length(detalle, "detalle", 255)
        new_id = cls.repository.insert(
            {
                "id_mensaje": id_mensaje,
                "id_notificacion": id_notificacion,
                "id_estado_anterior": id_estado_anterior,
                "id_estado_nuevo": id_estado_nuevo,
                "detalle": detalle,
                "fecha_historial": now_iso(),
            }
        )
        return cls._to_read(cls.repository.get(new_id))

    @staticmethod
    def _to_read(row) -> HistorialMensajeRead:
        return HistorialMensajeRead.model_validate(dict(row))
