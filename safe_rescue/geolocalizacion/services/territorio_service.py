"""
Services for paises, regiones and comunas.

A region must point to an existing country and a comuna to an
existing region; parents with children cannot be deleted.
"""

from typing import Any, Dict, Optional

from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.validation import check_length, require, require_text
from safe_rescue.geolocalizacion.db import get_connection
from safe_rescue.geolocalizacion.schemas.territorio import ComunaRead, PaisRead, RegionRead


class PaisService(CrudService):
    label = "El país"
    read_schema = PaisRead
    repository = Repository(
        "paises",
        "id_pais",
        ("nombre", "codigo_iso"),
        get_connection,
        "País",
        integrity_message="Error de integridad de datos. El código ISO ya existe.",
    )

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("nombre"), "nombre", 50)
        codigo = values.get("codigo_iso")
        require(codigo, "codigo_iso")
        if len(codigo) != 3:
            raise ValidationError("El código ISO debe tener exactamente 3 caracteres", field="codigo_iso")


class RegionService(CrudService):
    label = "La región"
    read_schema = RegionRead
    repository = Repository(
        "regiones",
        "id_region",
        ("nombre", "identificacion", "id_pais"),
        get_connection,
        "Región",
        integrity_message="Error de integridad de datos. La identificación de la región ya existe.",
    )

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("nombre"), "nombre", 100)
        require_text(values.get("identificacion"), "identificacion", 5)
        require(values.get("id_pais"), "id_pais")
        if not PaisService.repository.exists(values["id_pais"]):
            raise ValidationError("El país asociado no existe", field="id_pais")


class ComunaService(CrudService):
    label = "La comuna"
    read_schema = ComunaRead
    repository = Repository(
        "comunas",
        "id_comuna",
        ("nombre", "codigo_postal", "id_region"),
        get_connection,
        "Comuna",
    )

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require_text(values.get("nombre"), "nombre", 100)
        check_length(values.get("codigo_postal"), "codigo_postal", 10)
        require(values.get("id_region"), "id_region")
        if not RegionService.repository.exists(values["id_region"]):
            raise ValidationError("La región asociada no existe", field="id_region")
