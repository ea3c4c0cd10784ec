"""Team endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.perfiles.schemas.organizacion import EquipoCreate, EquipoRead, EquipoUpdate
from safe_rescue.perfiles.services.organizacion_service import EquipoService

router = APIRouter()


@router.get("", response_model=List[EquipoRead])
@handle_service_errors
def list_equipos():
    return list_or_no_content(EquipoService.find_all())


@router.get("/{id_equipo}", response_model=EquipoRead)
@handle_service_errors
def get_equipo(id_equipo: int) -> EquipoRead:
    return EquipoService.find_by_id(id_equipo)


@router.post("", response_model=EquipoRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_equipo(equipo_in: EquipoCreate) -> EquipoRead:
    return EquipoService.save(equipo_in)


@router.put("/{id_equipo}", response_model=EquipoRead)
@handle_service_errors
def update_equipo(id_equipo: int, equipo_in: EquipoUpdate) -> EquipoRead:
    """Update a team.

    Leader, company and type keep their current value unless sent.  A
    change of ``id_estado`` is recorded in the team's history.
    """
    return EquipoService.update(id_equipo, equipo_in)


@router.delete("/{id_equipo}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_equipo(id_equipo: int) -> None:
    EquipoService.delete(id_equipo)
