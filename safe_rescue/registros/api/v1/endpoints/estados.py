"""
State catalogue endpoints.

``GET /estados/{id}`` is called by Perfiles, Comunicación and
Incidentes to check the ``id_estado`` values they store.
"""

from typing import List

from fastapi import APIRouter, Query, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.registros.schemas.catalogo import EstadoCreate, EstadoRead, EstadoUpdate
from safe_rescue.registros.services.catalogo_service import EstadoService

router = APIRouter()


@router.get("", response_model=List[EstadoRead])
@handle_service_errors
def list_estados():
    return list_or_no_content(EstadoService.find_all())


@router.get("/buscar", response_model=EstadoRead)
@handle_service_errors
def find_estado_by_nombre(nombre: str = Query(..., description="Nombre exacto")) -> EstadoRead:
    return EstadoService.find_by_nombre(nombre)


@router.get("/{id_estado}", response_model=EstadoRead)
@handle_service_errors
def get_estado(id_estado: int) -> EstadoRead:
    return EstadoService.find_by_id(id_estado)


@router.post("", response_model=EstadoRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_estado(estado_in: EstadoCreate) -> EstadoRead:
    return EstadoService.save(estado_in)


@router.put("/{id_estado}", response_model=EstadoRead)
@handle_service_errors
def update_estado(id_estado: int, estado_in: EstadoUpdate) -> EstadoRead:
    return EstadoService.update(id_estado, estado_in)


@router.delete("/{id_estado}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_estado(id_estado: int) -> None:
    EstadoService.delete(id_estado)
