"""Incident type endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.incidentes.schemas.incidente import (
    TipoIncidenteCreate,
    TipoIncidenteRead,
    TipoIncidenteUpdate,
)
from safe_rescue.incidentes.services.tipo_incidente_service import TipoIncidenteService

router = APIRouter()


@router.get("", response_model=List[TipoIncidenteRead])
@handle_service_errors
def list_tipos_incidente():
    return list_or_no_content(TipoIncidenteService.find_all())


@router.get("/{id_tipo_incidente}", response_model=TipoIncidenteRead)
@handle_service_errors
def get_tipo_incidente(id_tipo_incidente: int) -> TipoIncidenteRead:
    return TipoIncidenteService.find_by_id(id_tipo_incidente)


@router.post("", response_model=TipoIncidenteRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_tipo_incidente(tipo_in: TipoIncidenteCreate) -> TipoIncidenteRead:
    return TipoIncidenteService.save(tipo_in)


@router.put("/{id_tipo_incidente}", response_model=TipoIncidenteRead)
@handle_service_errors
def update_tipo_incidente(id_tipo_incidente: int, tipo_in: TipoIncidenteUpdate) -> TipoIncidenteRead:
    return TipoIncidenteService.update(id_tipo_incidente, tipo_in)


@router.delete("/{id_tipo_incidente}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_tipo_incidente(id_tipo_incidente: int) -> None:
    """Delete a type; 409 while incidents use it."""
    TipoIncidenteService.delete(id_tipo_incidente)
