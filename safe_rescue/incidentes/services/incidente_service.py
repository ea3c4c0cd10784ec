"""
Incidents and their change history.

Every way of changing an incident (full update, partial update and the
``asignar-*`` shortcuts) goes through ``IncidenteService.apply_changes``,
which validates the merged row, stamps ``fecha_ultima_actualizacion`` and
appends one history row per meaningful change:

* a new state: "Se cambió el estado a: <nombre del estado>"
* a new assignee: "Incidente asignado a: <nombre del usuario>"
* a new title: "Se cambió el título a: <título>"
* a new description: "Se actualizó la descripción del incidente."

Referenced ids owned by other services are only checked remotely when
they change.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel

from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import NotFoundError, ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.timestamps import now_iso
from safe_rescue.core.validation import check_length, is_blank, require, require_payload, require_text
from safe_rescue.incidentes import clients
from safe_rescue.incidentes.db import get_connection
from safe_rescue.incidentes.schemas.incidente import IncidenteRead, UbicacionIncidente
from safe_rescue.incidentes.services.historial_incidente_service import HistorialIncidenteService
from safe_rescue.incidentes.services.tipo_incidente_service import TipoIncidenteService

logger = logging.getLogger(__name__)

INCIDENTE_COLUMNS = (
    "titulo",
    "detalle",
    "fecha_registro",
    "fecha_ultima_actualizacion",
    "region",
    "comuna",
    "direccion",
    "id_tipo_incidente",
    "id_ciudadano",
    "id_estado_incidente",
    "id_usuario_asignado",
    "id_direccion",
    "id_foto",
)


class IncidenteService(CrudService):
    label = "El incidente"
    read_schema = IncidenteRead
    repository = Repository("incidentes", "id_incidente", INCIDENTE_COLUMNS, get_connection, "Incidente")

    @classmethod
    def prepare_create(cls, data: BaseModel) -> Dict[str, Any]:
        values = data.model_dump(mode="json")
        now = now_iso()
        values["fecha_registro"] = values.get("fecha_registro") or now
        values["fecha_ultima_actualizacion"] = now
        return values

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        cls._check_fields(values)
        cls._check_references(values)

    @classmethod
    def update(cls, entity_id: int, data: Optional[BaseModel]) -> IncidenteRead:
        require_payload(data, cls.label)
        return cls.apply_changes(entity_id, data.model_dump(mode="json", exclude_unset=True))

    @classmethod
    def partial_update(cls, id_incidente: int, data: Optional[BaseModel]) -> IncidenteRead:
        """Apply only the fields that carry a non-empty value."""
        require_payload(data, cls.label)
        changes = {
            key: value
            for key, value in data.model_dump(mode="json", exclude_unset=True).items()
            if not is_blank(value)
        }
        return cls.apply_changes(id_incidente, changes)

    @classmethod
    def apply_changes(
        cls,
        id_incidente: int,
        changes: Dict[str, Any],
        known: Optional[Dict[str, Dict[str, Any]]] = None,
    ) -> IncidenteRead:
        """Merge ``changes`` into the stored incident and record the history.

        ``known`` holds remote rows the caller already fetched, keyed by
        the column that references them.
        """
        current = dict(cls.repository.get(id_incidente))
        changes.pop("fecha_registro", None)
        merged = {**current, **changes}
        cls._check_fields(merged)
        found = cls._check_references(merged, previous=current, known=known)
        merged["fecha_ultima_actualizacion"] = now_iso()
        cls.repository.update(id_incidente, merged)
        cls._registrar_cambios(id_incidente, current, merged, found)
        return cls.find_by_id(id_incidente)

    @classmethod
    def asignar_ciudadano(cls, id_incidente: int, id_ciudadano: int) -> IncidenteRead:
        cls.repository.get(id_incidente)
        usuario = clients.usuarios.get_usuario(id_ciudadano)
        if usuario is None:
            raise NotFoundError("Ciudadano", id_ciudadano)
        return cls.apply_changes(id_incidente, {"id_ciudadano": id_ciudadano}, {"id_ciudadano": usuario})

    @classmethod
    def asignar_estado(cls, id_incidente: int, id_estado: int) -> IncidenteRead:
        cls.repository.get(id_incidente)
        estado = clients.estados.get_estado(id_estado)
        if estado is None:
            raise NotFoundError("Estado", id_estado)
        return cls.apply_changes(
            id_incidente, {"id_estado_incidente": id_estado}, {"id_estado_incidente": estado}
        )

    @classmethod
    def asignar_tipo(cls, id_incidente: int, id_tipo_incidente: int) -> IncidenteRead:
        cls.repository.get(id_incidente)
        TipoIncidenteService.repository.get(id_tipo_incidente)
        return cls.apply_changes(id_incidente, {"id_tipo_incidente": id_tipo_incidente})

    @classmethod
    def asignar_usuario(cls, id_incidente: int, id_usuario: int) -> IncidenteRead:
        cls.repository.get(id_incidente)
        usuario = clients.usuarios.get_usuario(id_usuario)
        if usuario is None:
            raise NotFoundError("Usuario", id_usuario)
        return cls.apply_changes(
            id_incidente, {"id_usuario_asignado": id_usuario}, {"id_usuario_asignado": usuario}
        )

    @classmethod
    def asignar_direccion(cls, id_incidente: int, id_direccion: int) -> IncidenteRead:
        cls.repository.get(id_incidente)
        direccion = clients.geolocalizacion.get_direccion(id_direccion)
        if direccion is None:
            raise NotFoundError("Dirección", id_direccion)
        return cls.apply_changes(id_incidente, {"id_direccion": id_direccion}, {"id_direccion": direccion})

    @classmethod
    def agregar_ubicacion(cls, id_incidente: int, ubicacion: Optional[UbicacionIncidente]) -> IncidenteRead:
        """Create the address in Geolocalización and link it to the incident."""
        require_payload(ubicacion, "La ubicación")
        cls.repository.get(id_incidente)
        require_text(ubicacion.calle, "calle", 150)
        require_text(ubicacion.numero, "numero", 10)
        require(ubicacion.id_comuna, "id_comuna")
        require(ubicacion.latitud, "latitud")
        require(ubicacion.longitud, "longitud")
        created = clients.geolocalizacion.crear_direccion(
            {
                "calle": ubicacion.calle,
                "numero": ubicacion.numero,
                "villa": ubicacion.villa,
                "complemento": ubicacion.complemento,
                "id_comuna": ubicacion.id_comuna,
                "coordenadas": {"latitud": ubicacion.latitud, "longitud": ubicacion.longitud},
            }
        )
        logger.info("Created direccion %s for incidente %s", created["id_direccion"], id_incidente)
        return cls.apply_changes(
            id_incidente, {"id_direccion": created["id_direccion"]}, {"id_direccion": created}
        )

    @classmethod
    def update_foto(cls, id_incidente: int, id_foto: Optional[int]) -> IncidenteRead:
        require(id_foto, "id_foto")
        cls.repository.get(id_incidente)
        cls.repository.update(
            id_incidente, {"id_foto": id_foto, "fecha_ultima_actualizacion": now_iso()}
        )
        return cls.find_by_id(id_incidente)

    @classmethod
    def subir_foto(
        cls,
        id_incidente: int,
        filename: Optional[str],
        content: bytes,
        content_type: Optional[str],
    ) -> IncidenteRead:
        """Upload an image to Registros and link the returned foto."""
        cls.repository.get(id_incidente)
        if not content:
            raise ValidationError("El archivo está vacío", field="archivo")
        id_foto = clients.fotos.subir_foto(filename or "foto", content, content_type)
        logger.info("Linked foto %s to incidente %s", id_foto, id_incidente)
        return cls.update_foto(id_incidente, id_foto)

    @classmethod
    def historial(cls, id_incidente: int):
        cls.repository.get(id_incidente)
        return HistorialIncidenteService.find_by_incidente(id_incidente)

    @staticmethod
    def _check_fields(values: Dict[str, Any]) -> None:
        require_text(values.get("titulo"), "titulo", 50)
        require_text(values.get("detalle"), "detalle", 400)
        check_length(values.get("region"), "region", 100)
        check_length(values.get("comuna"), "comuna", 100)
        check_length(values.get("direccion"), "direccion", 200)
        for field in ("id_tipo_incidente", "id_ciudadano", "id_estado_incidente", "id_direccion"):
            require(values.get(field), field)

    @classmethod
    def _check_references(
        cls,
        values: Dict[str, Any],
        previous: Optional[Dict[str, Any]] = None,
        known: Optional[Dict[str, Dict[str, Any]]] = None,
    ) -> Dict[str, Dict[str, Any]]:
        """Check referenced ids and return the remote rows fetched."""
        found = dict(known or {})

        def changed(field: str) -> bool:
            return previous is None or values.get(field) != previous.get(field)

        if changed("id_tipo_incidente") and not TipoIncidenteService.repository.exists(
            values["id_tipo_incidente"]
        ):
            raise ValidationError("El tipo de incidente asociado no existe", field="id_tipo_incidente")

        remote = (
            ("id_ciudadano", clients.usuarios.get_usuario, "El ciudadano asociado no existe"),
            ("id_estado_incidente", clients.estados.get_estado, "El estado asociado no existe"),
            ("id_usuario_asignado", clients.usuarios.get_usuario, "El usuario asignado no existe"),
            ("id_direccion", clients.geolocalizacion.get_direccion, "La dirección asociada no existe"),
        )
        for field, lookup, message in remote:
            value = values.get(field)
            if value is None or field in found or not changed(field):
                continue
            row = lookup(value)
            if row is None:
                raise ValidationError(message, field=field)
            found[field] = row
        return found

    @staticmethod
    def _registrar_cambios(
        id_incidente: int,
        previous: Dict[str, Any],
        current: Dict[str, Any],
        found: Dict[str, Dict[str, Any]],
    ) -> None:
        estado = previous["id_estado_incidente"]
        nuevo_estado = current["id_estado_incidente"]
        if nuevo_estado != estado:
            nombre = found.get("id_estado_incidente", {}).get("nombre")
            detalle = f"Se cambió el estado a: {nombre}" if nombre else f"Se cambió el estado a ID: {nuevo_estado}"
            HistorialIncidenteService.registrar(id_incidente, estado, nuevo_estado, detalle)
            estado = nuevo_estado

        asignado = current["id_usuario_asignado"]
        if asignado is not None and asignado != previous["id_usuario_asignado"]:
            nombre = found.get("id_usuario_asignado", {}).get("nombre") or f"Usuario {asignado}"
            HistorialIncidenteService.registrar(
                id_incidente, estado, estado, f"Incidente asignado a: {nombre}"
            )

        if current["titulo"] != previous["titulo"]:
            HistorialIncidenteService.registrar(
                id_incidente, estado, estado, f"Se cambió el título a: {current['titulo']}"
            )

        if current["detalle"] != previous["detalle"]:
            HistorialIncidenteService.registrar(
                id_incidente, estado, estado, "Se actualizó la descripción del incidente."
            )
