"""
Services for user types, team types, companies and teams.

Companies reference an address held by Geolocalización and teams a
state held by Registros; both are checked over HTTP before writing.
A team leader, when given, must be a registered firefighter.
"""

import logging
from typing import Any, Dict, Optional

from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.validation import require, require_text
from safe_rescue.perfiles import clients
from safe_rescue.perfiles.db import get_connection
from safe_rescue.perfiles.schemas.organizacion import (
    CompaniaRead,
    EquipoRead,
    TipoEquipoRead,
    TipoUsuarioRead,
)

logger = logging.getLogger(__name__)


class TipoUsuarioService(CrudService):
    label = "El tipo de usuario"
    read_schema = TipoUsuarioRead
    repository = Repository(
        "tipos_usuario", "id_tipo_usuario", ("nombre",), get_connection, "Tipo de usuario"
    )

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("nombre"), "nombre", 50)


class TipoEquipoService(CrudService):
    label = "El tipo de equipo"
    read_schema = TipoEquipoRead
    repository = Repository(
        "tipos_equipo", "id_tipo_equipo", ("nombre",), get_connection, "Tipo de equipo"
    )

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("nombre"), "nombre", 50)


class CompaniaService(CrudService):
    label = "La compañía"
    read_schema = CompaniaRead
    repository = Repository(
        "companias",
        "id_compania",
        ("nombre", "id_direccion"),
        get_connection,
        "Compañía",
        integrity_message="Error de integridad de datos. El nombre de la compañía ya existe.",
    )

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("nombre"), "nombre", 50)
        require(values.get("id_direccion"), "id_direccion")
        if not cls.reference_changed(values, entity_id, "id_direccion"):
            return
        if clients.geolocalizacion.get_direccion(values["id_direccion"]) is None:
            raise ValidationError("La dirección asociada no existe", field="id_direccion")


class EquipoService(CrudService):
    label = "El equipo"
    read_schema = EquipoRead
    repository = Repository(
        "equipos",
        "id_equipo",
        ("nombre", "id_lider", "id_compania", "id_tipo_equipo", "id_estado"),
        get_connection,
        "Equipo",
    )

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        from safe_rescue.perfiles.services.usuario_service import BomberoService

        require_text(values.get("nombre"), "nombre", 50)
        require(values.get("id_compania"), "id_compania")
        require(values.get("id_tipo_equipo"), "id_tipo_equipo")
        require(values.get("id_estado"), "id_estado")
        if not CompaniaService.repository.exists(values["id_compania"]):
            raise ValidationError("La compañía asociada no existe", field="id_compania")
        if not TipoEquipoService.repository.exists(values["id_tipo_equipo"]):
            raise ValidationError("El tipo de equipo asociado no existe", field="id_tipo_equipo")
        if values.get("id_lider") is not None and not BomberoService.is_bombero(values["id_lider"]):
            raise ValidationError("El líder del equipo debe ser un bombero registrado", field="id_lider")
        changed = cls.reference_changed(values, entity_id, "id_estado")
        if changed and clients.estados.get_estado(values["id_estado"]) is None:
            raise ValidationError("El estado asociado no existe", field="id_estado")

    @classmethod
    def on_updated(cls, entity_id: int, previous: Dict[str, Any], current: Dict[str, Any]) -> None:
        from safe_rescue.perfiles.services.historial_service import HistorialUsuarioService

        if previous["id_estado"] != current["id_estado"]:
            HistorialUsuarioService.registrar_cambio_estado_equipo(
                entity_id,
                previous["id_estado"],
                current["id_estado"],
                f"Cambio de estado del equipo de {previous['id_estado']} a {current['id_estado']}",
            )
