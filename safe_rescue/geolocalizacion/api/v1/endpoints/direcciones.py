"""
Address endpoints.

This is the resource other services depend on: Perfiles validates the
``id_direccion`` of companies and citizens against ``GET
/direcciones/{id}`` and creates the address of a newly registered
citizen with ``POST /direcciones``, sending the coordinates inline.
"""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.geolocalizacion.schemas.direccion import DireccionCreate, DireccionRead, DireccionUpdate
from safe_rescue.geolocalizacion.services.direccion_service import DireccionService

router = APIRouter()


@router.get("", response_model=List[DireccionRead])
@handle_service_errors
def list_direcciones():
    return list_or_no_content(DireccionService.find_all())


@router.get("/{id_direccion}", response_model=DireccionRead)
@handle_service_errors
def get_direccion(id_direccion: int) -> DireccionRead:
    """Return one address with its coordinates embedded."""
    return DireccionService.find_by_id(id_direccion)


@router.post("", response_model=DireccionRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_direccion(direccion_in: DireccionCreate) -> DireccionRead:
    return DireccionService.save(direccion_in)


@router.put("/{id_direccion}", response_model=DireccionRead)
@handle_service_errors
def update_direccion(id_direccion: int, direccion_in: DireccionUpdate) -> DireccionRead:
    return DireccionService.update(id_direccion, direccion_in)


@router.delete("/{id_direccion}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_direccion(id_direccion: int) -> None:
    DireccionService.delete(id_direccion)
