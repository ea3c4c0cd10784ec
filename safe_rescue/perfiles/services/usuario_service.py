"""
Services for users and their citizen and firefighter subtypes.

Passwords are hashed with ``core.security.hash_password`` before they
are stored; the plain value is validated first.  Any change of
``id_estado`` appends a row to the user audit trail.

Citizens and firefighters are a ``usuarios`` row plus one row in
``ciudadanos`` or ``bomberos``; both rows are written in a single
transaction and the subtype row is removed together with the user.
"""

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import ConflictError, NotFoundError, ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.security import hash_password
from safe_rescue.core.timestamps import now_iso
from safe_rescue.core.validation import check_length, is_blank, require, require_payload, require_text
from safe_rescue.perfiles import clients
from safe_rescue.perfiles.db import get_connection
from safe_rescue.perfiles.schemas.usuario import BomberoRead, CiudadanoRead, UsuarioRead
from safe_rescue.perfiles.services.historial_service import HistorialUsuarioService
from safe_rescue.perfiles.services.organizacion_service import EquipoService, TipoUsuarioService

logger = logging.getLogger(__name__)

TIPO_USUARIO_ADMINISTRADOR = 4

USUARIO_INTEGRITY_MESSAGE = (
    "Error de integridad de datos. El RUN, teléfono, nombre de usuario o correo electrónico ya existen."
)

USUARIO_COLUMNS = (
    "run",
    "dv",
    "nombre",
    "a_paterno",
    "a_materno",
    "fecha_registro",
    "telefono",
    "correo",
    "nombre_usuario",
    "contrasenia",
    "intentos_fallidos",
    "razon_baneo",
    "dias_baneo",
    "id_estado",
    "id_foto",
    "id_tipo_usuario",
)


class UsuarioService(CrudService):
    label = "El usuario"
    read_schema = UsuarioRead
    repository = Repository(
        "usuarios",
        "id_usuario",
        USUARIO_COLUMNS,
        get_connection,
        "Usuario",
        integrity_message=USUARIO_INTEGRITY_MESSAGE,
    )

    @classmethod
    def prepare_create(cls, data: BaseModel) -> Dict[str, Any]:
        values = data.model_dump(mode="json")
        values["fecha_registro"] = values.get("fecha_registro") or now_iso()
        if values.get("intentos_fallidos") is None:
            values["intentos_fallidos"] = 0
        return values

    @classmethod
    def save(cls, data: Optional[BaseModel]) -> UsuarioRead:
        require_payload(data, cls.label)
        values = cls.prepare_create(data)
        cls.validate(values)
        values["contrasenia"] = hash_password(values["contrasenia"])
        new_id = cls.repository.insert(values)
        return cls.find_by_id(new_id)

    @classmethod
    def update(cls, entity_id: int, data: Optional[BaseModel]) -> UsuarioRead:
        """Replace the fields present in ``data``, explicit nulls included."""
        require_payload(data, cls.label)
        return cls.apply_changes(entity_id, data.model_dump(mode="json", exclude_unset=True))

    @classmethod
    def partial_update(cls, id_usuario: int, data: Optional[BaseModel]) -> UsuarioRead:
        """Apply only non-empty fields, checking that a new correo or
        nombre_usuario is not taken by another user."""
        require_payload(data, cls.label)
        changes = {
            key: value
            for key, value in data.model_dump(mode="json", exclude_unset=True).items()
            if not is_blank(value)
        }
        cls.repository.get(id_usuario)
        cls._check_unique(id_usuario, changes, "correo", "El correo electrónico ya está en uso")
        cls._check_unique(id_usuario, changes, "nombre_usuario", "El nombre de usuario ya está en uso")
        return cls.apply_changes(id_usuario, changes)

    @classmethod
    def apply_changes(cls, id_usuario: int, changes: Dict[str, Any]) -> UsuarioRead:
        current = dict(cls.repository.get(id_usuario))
        merged = {**current, **changes}
        cls.validate(merged, entity_id=id_usuario, check_password="contrasenia" in changes)
        if "contrasenia" in changes:
            merged["contrasenia"] = hash_password(changes["contrasenia"])
        cls.repository.update(id_usuario, merged)
        cls.on_updated(id_usuario, current, merged)
        return cls.find_by_id(id_usuario)

    @classmethod
    def validate(
        cls,
        values: Dict[str, Any],
        entity_id: Optional[int] = None,
        check_password: bool = True,
    ) -> None:
        require_text(values.get("run"), "run", 8, min_length=7)
        dv = values.get("dv")
        require(dv, "dv")
        if len(dv) != 1:
            raise ValidationError("El dígito verificador debe tener exactamente 1 carácter", field="dv")
        require_text(values.get("nombre"), "nombre", 50)
        require_text(values.get("a_paterno"), "a_paterno", 50)
        require_text(values.get("a_materno"), "a_materno", 50)
        require_text(values.get("telefono"), "telefono", 9)
        require_text(values.get("correo"), "correo", 80)
        if "@" not in values["correo"]:
            raise ValidationError("El correo electrónico no es válido", field="correo")
        check_length(values.get("nombre_usuario"), "nombre_usuario", 20)
        check_length(values.get("razon_baneo"), "razon_baneo", 100)
        dias_baneo = values.get("dias_baneo")
        if dias_baneo is not None and dias_baneo < 0:
            raise ValidationError("Los días de baneo no pueden ser negativos", field="dias_baneo")
        if check_password:
            require_text(values.get("contrasenia"), "contrasenia", 70)
        require(values.get("id_tipo_usuario"), "id_tipo_usuario")
        require(values.get("id_estado"), "id_estado")
        if not TipoUsuarioService.repository.exists(values["id_tipo_usuario"]):
            raise ValidationError("El tipo de usuario asociado no existe", field="id_tipo_usuario")
        changed = cls.reference_changed(values, entity_id, "id_estado")
        if changed and clients.estados.get_estado(values["id_estado"]) is None:
            raise ValidationError("El estado asociado no existe", field="id_estado")

    @classmethod
    def on_updated(cls, entity_id: int, previous: Dict[str, Any], current: Dict[str, Any]) -> None:
        if previous["id_estado"] != current["id_estado"]:
            HistorialUsuarioService.registrar_cambio_estado_usuario(
                entity_id,
                previous["id_estado"],
                current["id_estado"],
                f"Cambio de estado del usuario de {previous['id_estado']} a {current['id_estado']}",
            )

    @classmethod
    def update_foto(cls, id_usuario: int, id_foto: Optional[int]) -> UsuarioRead:
        require(id_foto, "id_foto")
        cls.repository.get(id_usuario)
        cls.repository.update(id_usuario, {"id_foto": id_foto})
        return cls.find_by_id(id_usuario)

    @classmethod
    def subir_foto(
        cls,
        id_usuario: int,
        filename: Optional[str],
        content: bytes,
        content_type: Optional[str],
    ) -> UsuarioRead:
        """Upload an image to Registros and link the returned foto."""
        cls.repository.get(id_usuario)
        if not content:
            raise ValidationError("El archivo está vacío", field="archivo")
        id_foto = clients.fotos.subir_foto(filename or "foto", content, content_type)
        logger.info("Linked foto %s to usuario %s", id_foto, id_usuario)
        return cls.update_foto(id_usuario, id_foto)

    @classmethod
    def find_row_by_correo(cls, correo: str) -> Optional[sqlite3.Row]:
        rows = cls.repository.find_where("correo = ?", (correo,))
        return rows[0] if rows else None

    @classmethod
    def exists_by_run(cls, run: str) -> bool:
        return bool(cls.repository.find_where("run = ?", (run,)))

    @classmethod
    def _check_unique(cls, id_usuario: int, changes: Dict[str, Any], field: str, message: str) -> None:
        if field not in changes:
            return
        rows = cls.repository.find_where(f"{field} = ? AND id_usuario <> ?", (changes[field], id_usuario))
        if rows:
            raise ConflictError(message, details={"field": field})


class _SubtipoUsuarioService:
    """A user extended by one row in a subtype table."""

    table: str
    column: str
    entity: str
    label: str
    read_schema: Any
    subtype_repository: Repository

    @classmethod
    def validate_subtipo(cls, value: Any) -> None:
        raise NotImplementedError

    @classmethod
    def find_all(cls) -> List[Any]:
        return [cls.read_schema.model_validate(dict(row)) for row in cls._select()]

    @classmethod
    def find_by_id(cls, id_usuario: int) -> Any:
        rows = cls._select("WHERE u.id_usuario = ?", (id_usuario,))
        if not rows:
            raise NotFoundError(cls.entity, id_usuario)
        return cls.read_schema.model_validate(dict(rows[0]))

    @classmethod
    def save(cls, data: Optional[BaseModel]) -> Any:
        require_payload(data, cls.label)
        values = UsuarioService.prepare_create(data)
        UsuarioService.validate(values)
        cls.validate_subtipo(values.get(cls.column))
        values["contrasenia"] = hash_password(values["contrasenia"])
        conn = get_connection()
        try:
            cursor = conn.cursor()
            id_usuario = UsuarioService.repository.insert_row(cursor, values)
            cls.subtype_repository.insert_row(cursor, {"id_usuario": id_usuario, cls.column: values[cls.column]})
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            logger.warning("Insert of %s rejected: %s", cls.entity, exc)
            raise ValidationError(USUARIO_INTEGRITY_MESSAGE) from exc
        finally:
            conn.close()
        logger.info("Created %s %s", cls.entity, id_usuario)
        return cls.find_by_id(id_usuario)

    @classmethod
    def update(cls, id_usuario: int, data: Optional[BaseModel]) -> Any:
        require_payload(data, cls.label)
        cls.find_by_id(id_usuario)
        changes = data.model_dump(mode="json", exclude_unset=True)
        subtype_changed = cls.column in changes
        subtype_value = changes.pop(cls.column, None)
        if subtype_changed:
            cls.validate_subtipo(subtype_value)
        UsuarioService.apply_changes(id_usuario, changes)
        if subtype_changed:
            cls.subtype_repository.update(id_usuario, {cls.column: subtype_value})
        return cls.find_by_id(id_usuario)

    @classmethod
    def delete(cls, id_usuario: int) -> None:
        cls.find_by_id(id_usuario)
        UsuarioService.delete(id_usuario)

    @classmethod
    def _select(cls, where: str = "", params: tuple = ()) -> List[sqlite3.Row]:
        query = (
            f"SELECT u.*, s.{cls.column} FROM usuarios u "
            f"JOIN {cls.table} s ON s.id_usuario = u.id_usuario "
            f"{where} ORDER BY u.id_usuario ASC"
        )
        conn = get_connection()
        try:
            return conn.execute(query, params).fetchall()
        finally:
            conn.close()


class CiudadanoService(_SubtipoUsuarioService):
    table = "ciudadanos"
    column = "id_direccion"
    entity = "Ciudadano"
    label = "El ciudadano"
    read_schema = CiudadanoRead
    subtype_repository = Repository(
        "ciudadanos", "id_usuario", ("id_usuario", "id_direccion"), get_connection, "Ciudadano"
    )

    @classmethod
    def validate_subtipo(cls, value: Any) -> None:
        require(value, "id_direccion")
        if clients.geolocalizacion.get_direccion(value) is None:
            raise ValidationError("La dirección asociada no existe", field="id_direccion")


class BomberoService(_SubtipoUsuarioService):
    table = "bomberos"
    column = "id_equipo"
    entity = "Bombero"
    label = "El bombero"
    read_schema = BomberoRead
    subtype_repository = Repository(
        "bomberos", "id_usuario", ("id_usuario", "id_equipo"), get_connection, "Bombero"
    )

    @classmethod
    def validate_subtipo(cls, value: Any) -> None:
        require(value, "id_equipo")
        if not EquipoService.repository.exists(value):
            raise ValidationError("El equipo asociado no existe", field="id_equipo")

    @classmethod
    def is_bombero(cls, id_usuario: int) -> bool:
        return cls.subtype_repository.exists(id_usuario)
