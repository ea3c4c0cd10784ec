"""
User notifications.

A notification is created in state 8 (Recibido) and moves to 9 (Visto)
once read.  Receptors are stored as the numeric text of the Perfiles
user id.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from safe_rescue.comunicacion import clients
from safe_rescue.comunicacion.db import get_connection
from safe_rescue.comunicacion.schemas.notificacion import NotificacionesLeidas, NotificacionRead
from safe_rescue.comunicacion.services.conversacion_service import ConversacionService
from safe_rescue.comunicacion.services.historial_mensaje_service import HistorialMensajeService
from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.timestamps import now_iso
from safe_rescue.core.validation import require, require_text

logger = logging.getLogger(__name__)

ESTADO_PENDIENTE = 8
ESTADO_LEIDA = 9


class NotificacionService(CrudService):
    label = "La notificación"
    read_schema = NotificacionRead
    order_by = "fecha_creacion DESC, id_notificacion DESC"
    repository = Repository(
        "notificaciones",
        "id_notificacion",
        ("id_conversacion", "id_usuario_receptor", "id_estado", "detalle", "fecha_creacion"),
        get_connection,
        "Notificación",
    )

    @classmethod
    def prepare_create(cls, data: BaseModel) -> Dict[str, Any]:
        values = data.model_dump(mode="json")
        if isinstance(values.get("id_usuario_receptor"), str):
            values["id_usuario_receptor"] = values["id_usuario_receptor"].strip()
        values["id_estado"] = ESTADO_PENDIENTE
        values["fecha_creacion"] = now_iso()
        return values

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("detalle"), "detalle", 255)
        require(values.get("id_conversacion"), "id_conversacion")
        receptor = values.get("id_usuario_receptor")
        require(receptor, "id_usuario_receptor")
        if not (receptor.isascii() and receptor.isdigit()):
            raise ValidationError(
                "El receptor debe ser un identificador numérico", field="id_usuario_receptor"
            )
        # Stored as the canonical text of the user id so lookups by id match.
        values["id_usuario_receptor"] = receptor = str(int(receptor))
        if not ConversacionService.repository.exists(values["id_conversacion"]):
            raise ValidationError("La conversación asociada no existe", field="id_conversacion")
        if clients.usuarios.get_usuario(int(receptor)) is None:
            raise ValidationError("El usuario receptor no existe", field="id_usuario_receptor")

    @classmethod
    def pendientes(cls, id_usuario: int, page: int = 0, size: int = 20) -> List[NotificacionRead]:
        rows = cls.repository.find_where(
            "id_usuario_receptor = ? AND id_estado = ?",
            (str(id_usuario), ESTADO_PENDIENTE),
            order_by=cls.order_by,
            limit=size,
            offset=page * size,
        )
        return [cls.to_read(row) for row in rows]

    @classmethod
    def marcar_leida(cls, id_notificacion: int) -> NotificacionRead:
        """Mark one notification as read; reading it again changes nothing."""
        current = cls.repository.get(id_notificacion)
        if current["id_estado"] == ESTADO_LEIDA:
            return cls.to_read(current)
        cls.repository.update(id_notificacion, {"id_estado": ESTADO_LEIDA})
        HistorialMensajeService.registrar(
            current["id_estado"],
            ESTADO_LEIDA,
            "Notificación marcada como leída",
            id_notificacion=id_notificacion,
        )
        return cls.find_by_id(id_notificacion)

    @classmethod
    def marcar_todas_leidas(cls, id_usuario: int) -> NotificacionesLeidas:
        """Mark every pending notification of a user as read in one statement."""
        receptor = str(id_usuario)
        conn = get_connection()
        try:
            cursor = conn.execute(
                "UPDATE notificaciones SET id_estado = ? WHERE id_usuario_receptor = ? AND id_estado = ?",
                (ESTADO_LEIDA, receptor, ESTADO_PENDIENTE),
            )
            conn.commit()
            actualizadas = cursor.rowcount
        finally:
            conn.close()
        logger.info("Marked %s notificaciones as read for usuario %s", actualizadas, receptor)
        return NotificacionesLeidas(id_usuario_receptor=receptor, actualizadas=actualizadas)
