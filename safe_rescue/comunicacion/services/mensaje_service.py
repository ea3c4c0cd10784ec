"""
Messages inside conversations.

``enviar`` is the path used by the apps: the sender must already take
part in the conversation and the message starts in state 7 (Enviado).
Every later state change is appended to the message history.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from safe_rescue.comunicacion import clients
from safe_rescue.comunicacion.db import get_connection
from safe_rescue.comunicacion.schemas.mensaje import MensajeEnvio, MensajeEstadoUpdate, MensajeRead
from safe_rescue.comunicacion.services.conversacion_service import ConversacionService, ParticipanteService
from safe_rescue.comunicacion.services.historial_mensaje_service import HistorialMensajeService
from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import ConflictError, ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.timestamps import now_iso
from safe_rescue.core.validation import require, require_payload, require_text

logger = logging.getLogger(__name__)

ESTADO_ENVIADO = 7


class MensajeService(CrudService):
    label = "El mensaje"
    read_schema = MensajeRead
    order_by = "fecha_creacion DESC, id_mensaje DESC"
    repository = Repository(
        "mensajes",
        "id_mensaje",
        ("id_conversacion", "id_usuario_emisor", "id_estado", "detalle", "fecha_creacion"),
        get_connection,
        "Mensaje",
    )

    @classmethod
    def prepare_create(cls, data: BaseModel) -> Dict[str, Any]:
        values = data.model_dump(mode="json")
        values["fecha_creacion"] = now_iso()
        return values

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("detalle"), "detalle", 2000)
        require(values.get("id_conversacion"), "id_conversacion")
        require(values.get("id_usuario_emisor"), "id_usuario_emisor")
        require(values.get("id_estado"), "id_estado")
        if not ConversacionService.repository.exists(values["id_conversacion"]):
            raise ValidationError("La conversación asociada no existe", field="id_conversacion")
        if clients.usuarios.get_usuario(values["id_usuario_emisor"]) is None:
            raise ValidationError("El usuario emisor no existe", field="id_usuario_emisor")
        if clients.estados.get_estado(values["id_estado"]) is None:
            raise ValidationError("El estado asociado no existe", field="id_estado")

    @classmethod
    def enviar(cls, id_conversacion: int, envio: Optional[MensajeEnvio]) -> MensajeRead:
        """Post a message from a participant of ``id_conversacion``."""
        require_payload(envio, cls.label)
        ConversacionService.repository.get(id_conversacion)
        require(envio.id_usuario_emisor, "id_usuario_emisor")
        require_text(envio.detalle, "detalle", 2000)
        if not ParticipanteService.es_participante(id_conversacion, envio.id_usuario_emisor):
            raise ConflictError(
                "El usuario no participa en la conversación",
                details={"id_conversacion": id_conversacion, "id_usuario": envio.id_usuario_emisor},
            )
        new_id = cls.repository.insert(
            {
                "id_conversacion": id_conversacion,
                "id_usuario_emisor": envio.id_usuario_emisor,
                "id_estado": ESTADO_ENVIADO,
                "detalle": envio.detalle,
                "fecha_creacion": now_iso(),
            }
        )
        return cls.find_by_id(new_id)

    @classmethod
    def actualizar_estado(cls, id_mensaje: int, cambio: Optional[MensajeEstadoUpdate]) -> MensajeRead:
        require_payload(cambio, "El cambio de estado")
        current = cls.repository.get(id_mensaje)
        require(cambio.id_estado, "id_estado")
        if cambio.id_estado == current["id_estado"]:
            return cls.to_read(current)
        if clients.estados.get_estado(cambio.id_estado) is None:
            raise ValidationError("El estado asociado no existe", field="id_estado")
        cls.repository.update(id_mensaje, {"id_estado": cambio.id_estado})
        HistorialMensajeService.registrar(
            current["id_estado"],
            cambio.id_estado,
            cambio.detalle or f"Cambio de estado del mensaje de {current['id_estado']} a {cambio.id_estado}",
            id_mensaje=id_mensaje,
        )
        return cls.find_by_id(id_mensaje)

    @classmethod
    def find_by_conversacion(cls, id_conversacion: int, page: int = 0, size: int = 20) -> List[MensajeRead]:
        """One page of the conversation, oldest message first."""
        ConversacionService.repository.get(id_conversacion)
        rows = cls.repository.find_where(
            "id_conversacion = ?",
            (id_conversacion,),
            order_by="fecha_creacion ASC, id_mensaje ASC",
            limit=size,
            offset=page * size,
        )
        return [cls.to_read(row) for row in rows]

    @classmethod
    def historial(cls, id_mensaje: int):
        cls.repository.get(id_mensaje)
        return HistorialMensajeService.find_by_mensaje(id_mensaje)
