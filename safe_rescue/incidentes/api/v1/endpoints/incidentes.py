"""
Incident endpoints.

``PUT`` copies every field sent, ``PATCH`` ignores empty ones; both and
the ``asignar-*`` shortcuts append history rows for state, assignee,
title and description changes.
"""

from typing import List

from fastapi import APIRouter, File, UploadFile, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.incidentes.schemas.incidente import (
    FotoIncidenteUpdate,
    HistorialIncidenteRead,
    IncidenteCreate,
    IncidenteRead,
    IncidenteUpdate,
    UbicacionIncidente,
)
from safe_rescue.incidentes.services.incidente_service import IncidenteService

router = APIRouter()


@router.get("", response_model=List[IncidenteRead])
@handle_service_errors
def list_incidentes():
    return list_or_no_content(IncidenteService.find_all())


@router.get("/{id_incidente}", response_model=IncidenteRead)
@handle_service_errors
def get_incidente(id_incidente: int) -> IncidenteRead:
    return IncidenteService.find_by_id(id_incidente)


@router.get("/{id_incidente}/historial", response_model=List[HistorialIncidenteRead])
@handle_service_errors
def get_historial_incidente(id_incidente: int):
    return list_or_no_content(IncidenteService.historial(id_incidente))


@router.post("", response_model=IncidenteRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_incidente(incidente_in: IncidenteCreate) -> IncidenteRead:
    return IncidenteService.save(incidente_in)


@router.put("/{id_incidente}", response_model=IncidenteRead)
@handle_service_errors
def update_incidente(id_incidente: int, incidente_in: IncidenteUpdate) -> IncidenteRead:
    return IncidenteService.update(id_incidente, incidente_in)


@router.patch("/{id_incidente}", response_model=IncidenteRead)
@handle_service_errors
def patch_incidente(id_incidente: int, incidente_in: IncidenteUpdate) -> IncidenteRead:
    return IncidenteService.partial_update(id_incidente, incidente_in)


@router.delete("/{id_incidente}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_incidente(id_incidente: int) -> None:
    IncidenteService.delete(id_incidente)


@router.post("/{id_incidente}/asignar-ciudadano/{id_ciudadano}", response_model=IncidenteRead)
@handle_service_errors
def asignar_ciudadano(id_incidente: int, id_ciudadano: int) -> IncidenteRead:
    return IncidenteService.asignar_ciudadano(id_incidente, id_ciudadano)


@router.post("/{id_incidente}/asignar-estado-incidente/{id_estado}", response_model=IncidenteRead)
@handle_service_errors
def asignar_estado(id_incidente: int, id_estado: int) -> IncidenteRead:
    return IncidenteService.asignar_estado(id_incidente, id_estado)


@router.post("/{id_incidente}/asignar-tipo-incidente/{id_tipo_incidente}", response_model=IncidenteRead)
@handle_service_errors
def asignar_tipo(id_incidente: int, id_tipo_incidente: int) -> IncidenteRead:
    return IncidenteService.asignar_tipo(id_incidente, id_tipo_incidente)


@router.post("/{id_incidente}/asignar-usuario-asignado/{id_usuario}", response_model=IncidenteRead)
@handle_service_errors
def asignar_usuario(id_incidente: int, id_usuario: int) -> IncidenteRead:
    return IncidenteService.asignar_usuario(id_incidente, id_usuario)


@router.post("/{id_incidente}/asignar-direccion/{id_direccion}", response_model=IncidenteRead)
@handle_service_errors
def asignar_direccion(id_incidente: int, id_direccion: int) -> IncidenteRead:
    return IncidenteService.asignar_direccion(id_incidente, id_direccion)


@router.post("/{id_incidente}/agregar-ubicacion", response_model=IncidenteRead)
@handle_service_errors
def agregar_ubicacion(id_incidente: int, ubicacion: UbicacionIncidente) -> IncidenteRead:
    """Create an address in Geolocalización and link it to the incident."""
    return IncidenteService.agregar_ubicacion(id_incidente, ubicacion)


@router.patch("/{id_incidente}/foto", response_model=IncidenteRead)
@handle_service_errors
def update_foto_incidente(id_incidente: int, foto_in: FotoIncidenteUpdate) -> IncidenteRead:
    return IncidenteService.update_foto(id_incidente, foto_in.id_foto)


@router.post("/{id_incidente}/subir-foto", response_model=IncidenteRead)
@handle_service_errors
def upload_foto_incidente(id_incidente: int, archivo: UploadFile = File(...)) -> IncidenteRead:
    content = archivo.file.read()
    return IncidenteService.subir_foto(id_incidente, archivo.filename, content, archivo.content_type)
