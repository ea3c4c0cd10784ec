"""Team type endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.perfiles.schemas.organizacion import TipoEquipoCreate, TipoEquipoRead, TipoEquipoUpdate
from safe_rescue.perfiles.services.organizacion_service import TipoEquipoService

router = APIRouter()


@router.get("", response_model=List[TipoEquipoRead])
@handle_service_errors
def list_tipos_equipo():
    return list_or_no_content(TipoEquipoService.find_all())


@router.get("/{id_tipo_equipo}", response_model=TipoEquipoRead)
@handle_service_errors
def get_tipo_equipo(id_tipo_equipo: int) -> TipoEquipoRead:
    return TipoEquipoService.find_by_id(id_tipo_equipo)


@router.post("", response_model=TipoEquipoRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_tipo_equipo(tipo_in: TipoEquipoCreate) -> TipoEquipoRead:
    return TipoEquipoService.save(tipo_in)


@router.put("/{id_tipo_equipo}", response_model=TipoEquipoRead)
@handle_service_errors
def update_tipo_equipo(id_tipo_equipo: int, tipo_in: TipoEquipoUpdate) -> TipoEquipoRead:
    return TipoEquipoService.update(id_tipo_equipo, tipo_in)


@router.delete("/{id_tipo_equipo}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_tipo_equipo(id_tipo_equipo: int) -> None:
    TipoEquipoService.delete(id_tipo_equipo)
