"""Historial endpoints.  Entries are append-only: there is no update route."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.registros.schemas.historial import HistorialCreate, HistorialRead
from safe_rescue.registros.services.historial_service import HistorialService

router = APIRouter()


@router.get("", response_model=List[HistorialRead])
@handle_service_errors
def list_historial():
    """Return every entry, newest first."""
    return list_or_no_content(HistorialService.find_all())


@router.get("/estado/{id_estado}", response_model=List[HistorialRead])
@handle_service_errors
def list_historial_by_estado(id_estado: int):
    return list_or_no_content(HistorialService.find_by_estado(id_estado))


@router.get("/{id_historial}", response_model=HistorialRead)
@handle_service_errors
def get_historial(id_historial: int) -> HistorialRead:
    return HistorialService.find_by_id(id_historial)


@router.post("", response_model=HistorialRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_historial(historial_in: HistorialCreate) -> HistorialRead:
    return HistorialService.save(historial_in)


@router.delete("/{id_historial}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_historial(id_historial: int) -> None:
    HistorialService.delete(id_historial)
