"""Coordinate endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.geolocalizacion.schemas.direccion import (
    CoordenadasCreate,
    CoordenadasRead,
    CoordenadasUpdate,
)
from safe_rescue.geolocalizacion.services.direccion_service import CoordenadasService

router = APIRouter()


@router.get("", response_model=List[CoordenadasRead])
@handle_service_errors
def list_coordenadas():
    return list_or_no_content(CoordenadasService.find_all())


@router.get("/{id_coordenadas}", response_model=CoordenadasRead)
@handle_service_errors
def get_coordenadas(id_coordenadas: int) -> CoordenadasRead:
    return CoordenadasService.find_by_id(id_coordenadas)


@router.post("", response_model=CoordenadasRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_coordenadas(coordenadas_in: CoordenadasCreate) -> CoordenadasRead:
    return CoordenadasService.save(coordenadas_in)


@router.put("/{id_coordenadas}", response_model=CoordenadasRead)
@handle_service_errors
def update_coordenadas(id_coordenadas: int, coordenadas_in: CoordenadasUpdate) -> CoordenadasRead:
    return CoordenadasService.update(id_coordenadas, coordenadas_in)


@router.delete("/{id_coordenadas}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_coordenadas(id_coordenadas: int) -> None:
    """Delete coordinates; 409 while a direccion still uses them."""
    CoordenadasService.delete(id_coordenadas)
