"""Comuna endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.geolocalizacion.schemas.territorio import ComunaCreate, ComunaRead, ComunaUpdate
from safe_rescue.geolocalizacion.services.territorio_service import ComunaService

router = APIRouter()


@router.get("", response_model=List[ComunaRead])
@handle_service_errors
def list_comunas():
    return list_or_no_content(ComunaService.find_all())


@router.get("/{id_comuna}", response_model=ComunaRead)
@handle_service_errors
def get_comuna(id_comuna: int) -> ComunaRead:
    return ComunaService.find_by_id(id_comuna)


@router.post("", response_model=ComunaRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_comuna(comuna_in: ComunaCreate) -> ComunaRead:
    return ComunaService.save(comuna_in)


@router.put("/{id_comuna}", response_model=ComunaRead)
@handle_service_errors
def update_comuna(id_comuna: int, comuna_in: ComunaUpdate) -> ComunaRead:
    return ComunaService.update(id_comuna, comuna_in)


@router.delete("/{id_comuna}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_comuna(id_comuna: int) -> None:
    ComunaService.delete(id_comuna)
