"""
Country endpoints.

Countries sit at the top of the address hierarchy; a country that still
has regions cannot be deleted (409).
"""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.geolocalizacion.schemas.territorio import PaisCreate, PaisRead, PaisUpdate
from safe_rescue.geolocalizacion.services.territorio_service import PaisService

router = APIRouter()


@router.get("", response_model=List[PaisRead])
@handle_service_errors
def list_paises():
    """Return every country, or 204 when none exist."""
    return list_or_no_content(PaisService.find_all())


@router.get("/{id_pais}", response_model=PaisRead)
@handle_service_errors
def get_pais(id_pais: int) -> PaisRead:
    return PaisService.find_by_id(id_pais)


@router.post("", response_model=PaisRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_pais(pais_in: PaisCreate) -> PaisRead:
    return PaisService.save(pais_in)


@router.put("/{id_pais}", response_model=PaisRead)
@handle_service_errors
def update_pais(id_pais: int, pais_in: PaisUpdate) -> PaisRead:
    return PaisService.update(id_pais, pais_in)


@router.delete("/{id_pais}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_pais(id_pais: int) -> None:
    PaisService.delete(id_pais)
