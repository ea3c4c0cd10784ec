"""Services for conversations and their participants."""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from safe_rescue.comunicacion import clients
from safe_rescue.comunicacion.db import get_connection
from safe_rescue.comunicacion.schemas.conversacion import ConversacionRead, ParticipanteRead
from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import ConflictError, NotFoundError, ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.timestamps import now_iso
from safe_rescue.core.validation import check_length, require_text

logger = logging.getLogger(__name__)


class ConversacionService(CrudService):
    label = "La conversación"
    read_schema = ConversacionRead
    order_by = "fecha_creacion DESC, id_conversacion DESC"
    repository = Repository(
        "conversaciones",
        "id_conversacion",
        ("tipo", "nombre", "fecha_creacion"),
        get_connection,
        "Conversación",
    )

    @classmethod
    def prepare_create(cls, data: BaseModel) -> Dict[str, Any]:
        values = data.model_dump(mode="json")
        values["fecha_creacion"] = now_iso()
        return values

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("tipo"), "tipo", 50)
        check_length(values.get("nombre"), "nombre", 100)

    @classmethod
    def find_by_tipo(cls, tipo: str) -> List[ConversacionRead]:
        rows = cls.repository.find_where("tipo = ?", (tipo,), order_by=cls.order_by)
        return [cls.to_read(row) for row in rows]


class ParticipanteService:
    """Membership of users in conversations.

    A user joins a conversation at most once; the pair is unique in the
    table as well.
    """

    repository = Repository(
        "participantes_conversacion",
        "id_participante_conv",
        ("id_usuario", "id_conversacion", "fecha_union"),
        get_connection,
        "Participante",
        integrity_message="El usuario ya participa en la conversación.",
    )

    @classmethod
    def unirse(cls, id_conversacion: int, id_usuario: int) -> ParticipanteRead:
        ConversacionService.repository.get(id_conversacion)
        if clients.usuarios.get_usuario(id_usuario) is None:
            raise ValidationError("El usuario asociado no existe", field="id_usuario")
        if cls.es_participante(id_conversacion, id_usuario):
            raise ConflictError(
                "El usuario ya participa en la conversación",
                details={"id_conversacion": id_conversacion, "id_usuario": id_usuario},
            )
        new_id = cls.repository.insert(
            {"id_usuario": id_usuario, "id_conversacion": id_conversacion, "fecha_union": now_iso()}
        )
        logger.info("Usuario %s joined conversacion %s", id_usuario, id_conversacion)
        return ParticipanteRead.model_validate(dict(cls.repository.get(new_id)))

    @classmethod
    def salir(cls, id_conversacion: int, id_usuario: int) -> None:
        rows = cls._find(id_conversacion, id_usuario)
        if not rows:
            raise NotFoundError(
                "Participante",
                details={"id_conversacion": id_conversacion, "id_usuario": id_usuario},
            )
        cls.repository.delete(rows[0]["id_participante_conv"])

    @classmethod
    def es_participante(cls, id_conversacion: int, id_usuario: int) -> bool:
        return bool(cls._find(id_conversacion, id_usuario))

    @classmethod
    def find_by_conversacion(cls, id_conversacion: int) -> List[ParticipanteRead]:
        ConversacionService.repository.get(id_conversacion)
        rows = cls.repository.find_where("id_conversacion = ?", (id_conversacion,))
        return [ParticipanteRead.model_validate(dict(row)) for row in rows]

    @classmethod
    def find_by_usuario(cls, id_usuario: int) -> List[ParticipanteRead]:
        rows = cls.repository.find_where(
            "id_usuario = ?",
            (id_usuario,),
            order_by="fecha_union DESC, id_participante_conv DESC",
        )
        return [ParticipanteRead.model_validate(dict(row)) for row in rows]

    @classmethod
    def _find(cls, id_conversacion: int, id_usuario: int):
        return cls.repository.find_where(
            "id_conversacion = ? AND id_usuario = ?", (id_conversacion, id_usuario)
        )
