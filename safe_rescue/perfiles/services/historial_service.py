"""
Audit trail of state changes for users and teams.

Rows are only ever appended.  The user and team services call
``registrar_cambio_estado_*`` whenever an update changes ``id_estado``.
"""

from typing import Any, Dict, List, Optional

from safe_rescue.core.exceptions import ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.timestamps import now_iso
from safe_rescue.core.validation import is_blank, require_text
from safe_rescue.perfiles.db import get_connection
from safe_rescue.perfiles.schemas.historial import HistorialUsuarioRead

ORDER = "fecha_historial DESC, id_historial DESC"


class HistorialUsuarioService:
    repository = Repository(
        "historial_usuarios",
        "id_historial",
        ("id_usuario", "id_equipo", "id_estado_anterior", "id_estado_nuevo", "fecha_historial", "detalle"),
        get_connection,
        "Historial de usuario",
    )

    @classmethod
    def find_all(cls) -> List[HistorialUsuarioRead]:
        return [cls._row_to_read(row) for row in cls.repository.find_all(ORDER)]

    @classmethod
    def find_by_usuario(cls, id_usuario: int) -> List[HistorialUsuarioRead]:
        """History of one user, newest first; 404 for an unknown user."""
        from safe_rescue.perfiles.services.usuario_service import UsuarioService

        UsuarioService.repository.get(id_usuario)
        rows = cls.repository.find_where("id_usuario = ?", (id_usuario,), order_by=ORDER)
        return [cls._row_to_read(row) for row in rows]

    @classmethod
    def find_by_equipo(cls, id_equipo: int) -> List[HistorialUsuarioRead]:
        from safe_rescue.perfiles.services.organizacion_service import EquipoService

        EquipoService.repository.get(id_equipo)
        rows = cls.repository.find_where("id_equipo = ?", (id_equipo,), order_by=ORDER)
        return [cls._row_to_read(row) for row in rows]

    @classmethod
    def registrar_cambio_estado_usuario(
        cls,
        id_usuario: Optional[int],
        id_estado_anterior: Optional[int],
        id_estado_nuevo: Optional[int],
        detalle: Optional[str],
    ) -> HistorialUsuarioRead:
        return cls._registrar({"id_usuario": id_usuario}, id_estado_anterior, id_estado_nuevo, detalle)

    @classmethod
    def registrar_cambio_estado_equipo(
        cls,
        id_equipo: Optional[int],
        id_estado_anterior: Optional[int],
        id_estado_nuevo: Optional[int],
        detalle: Optional[str],
    ) -> HistorialUsuarioRead:
        return cls._registrar({"id_equipo": id_equipo}, id_estado_anterior, id_estado_nuevo, detalle)

    @classmethod
    def _registrar(
        cls,
        owner: Dict[str, Any],
        id_estado_anterior: Optional[int],
        id_estado_nuevo: Optional[int],
        detalle: Optional[str],
    ) -> HistorialUsuarioRead:
        if any(value is None for value in owner.values()) or id_estado_anterior is None or id_estado_nuevo is None:
            raise ValidationError("Todos los identificadores del historial son obligatorios")
        if is_blank(detalle):
            raise ValidationError("El detalle del historial no puede estar vacío", field="detalle")
        require_text(detalle, "detalle", 250)
        values = dict(
            owner,
            id_estado_anterior=id_estado_anterior,
            id_estado_nuevo=id_estado_nuevo,
            fecha_historial=now_iso(),
            detalle=detalle.strip(),
        )
        new_id = cls.repository.insert(values)
        return cls._row_to_read(cls.repository.get(new_id))

    @staticmethod
    def _row_to_read(row: Any) -> HistorialUsuarioRead:
        return HistorialUsuarioRead.model_validate(dict(row))
