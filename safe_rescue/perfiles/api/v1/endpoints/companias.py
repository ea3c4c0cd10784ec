"""
Company endpoints.

The address of a company lives in Geolocalización; creating or
updating a company fails with 400 when that address does not exist and
with 502 when Geolocalización cannot be reached.
"""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.perfiles.schemas.organizacion import CompaniaCreate, CompaniaRead, CompaniaUpdate
from safe_rescue.perfiles.services.organizacion_service import CompaniaService

router = APIRouter()


@router.get("", response_model=List[CompaniaRead])
@handle_service_errors
def list_companias():
    return list_or_no_content(CompaniaService.find_all())


@router.get("/{id_compania}", response_model=CompaniaRead)
@handle_service_errors
def get_compania(id_compania: int) -> CompaniaRead:
    return CompaniaService.find_by_id(id_compania)


@router.post("", response_model=CompaniaRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_compania(compania_in: CompaniaCreate) -> CompaniaRead:
    return CompaniaService.save(compania_in)


@router.put("/{id_compania}", response_model=CompaniaRead)
@handle_service_errors
def update_compania(id_compania: int, compania_in: CompaniaUpdate) -> CompaniaRead:
    return CompaniaService.update(id_compania, compania_in)


@router.delete("/{id_compania}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_compania(id_compania: int) -> None:
    """Delete a company; 409 while teams belong to it."""
    CompaniaService.delete(id_compania)
