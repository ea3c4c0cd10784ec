"""
Services for coordenadas and direcciones.

A direccion always points to a comuna and to a coordenadas row.
Clients creating an address in one call (Perfiles during citizen
registration, Incidentes when locating an incident) send the
coordinates inline; both rows are then inserted in one transaction.
"""

import logging
import sqlite3
from typing import Any, Dict, Optional

from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import ValidationError
from safe_rescue.core.repository import INTEGRITY_MESSAGE, Repository
from safe_rescue.core.validation import check_length, require, require_payload, require_text
from safe_rescue.geolocalizacion.db import get_connection
from safe_rescue.geolocalizacion.schemas.direccion import (
    CoordenadasRead,
    DireccionCreate,
    DireccionRead,
)
from safe_rescue.geolocalizacion.services.territorio_service import ComunaService

logger = logging.getLogger(__name__)


class CoordenadasService(CrudService):
    label = "Las coordenadas"
    read_schema = CoordenadasRead
    repository = Repository(
        "coordenadas",
        "id_coordenadas",
        ("latitud", "longitud"),
        get_connection,
        "Coordenadas",
    )

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require(values.get("latitud"), "latitud")
        require(values.get("longitud"), "longitud")


class DireccionService(CrudService):
    label = "La dirección"
    read_schema = DireccionRead
    repository = Repository(
        "direcciones",
        "id_direccion",
        ("calle", "numero", "villa", "complemento", "id_comuna", "id_coordenadas"),
        get_connection,
        "Dirección",
    )

    @classmethod
    def save(cls, data: Optional[DireccionCreate]) -> DireccionRead:
        """Insert a direccion, creating its inline coordenadas when given."""
        require_payload(data, cls.label)
        values = data.model_dump(exclude={"coordenadas"})
        inline = data.coordenadas
        if inline is not None and values.get("id_coordenadas") is None:
            CoordenadasService.validate(inline.model_dump())
            cls.validate(values, inline_coordinates=True)
            new_id = cls._insert_with_coordinates(values, inline.latitud, inline.longitud)
        else:
            cls.validate(values)
            new_id = cls.repository.insert(values)
        return cls.find_by_id(new_id)

    @classmethod
    def validate(
        cls,
        values: Dict[str, Any],
        entity_id: Optional[int] = None,
        inline_coordinates: bool = False,
    ) -> None:
        require_text(values.get("calle"), "calle", 150)
        require_text(values.get("numero"), "numero", 10)
        check_length(values.get("villa"), "villa", 100)
        check_length(values.get("complemento"), "complemento", 50)
        require(values.get("id_comuna"), "id_comuna")
        if not ComunaService.repository.exists(values["id_comuna"]):
            raise ValidationError("La comuna asociada no existe", field="id_comuna")
        if inline_coordinates:
            return
        require(values.get("id_coordenadas"), "id_coordenadas")
        if not CoordenadasService.repository.exists(values["id_coordenadas"]):
            raise ValidationError("Las coordenadas asociadas no existen", field="id_coordenadas")

    @classmethod
    def to_read(cls, row: sqlite3.Row) -> DireccionRead:
        direccion = dict(row)
        coordenadas = CoordenadasService.repository.find_by_id(row["id_coordenadas"])
        if coordenadas is not None:
            direccion["coordenadas"] = CoordenadasService.to_read(coordenadas)
        return DireccionRead.model_validate(direccion)

    @staticmethod
    def _insert_with_coordinates(values: Dict[str, Any], latitud: float, longitud: float) -> int:
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO coordenadas (latitud, longitud) VALUES (?, ?)",
                (latitud, longitud),
            )
            cursor.execute(
                """
                INSERT INTO direcciones (calle, numero, villa, complemento, id_comuna, id_coordenadas)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    values["calle"],
                    values["numero"],
                    values.get("villa"),
                    values.get("complemento"),
                    values["id_comuna"],
                    cursor.lastrowid,
                ),
            )
            direccion_id = cursor.lastrowid
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            raise ValidationError(INTEGRITY_MESSAGE) from exc
        finally:
            conn.close()
        logger.info("Created Dirección %s with inline coordinates", direccion_id)
        return direccion_id
