"""Message endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.comunicacion.schemas.mensaje import (
    HistorialMensajeRead,
    MensajeCreate,
    MensajeEstadoUpdate,
    MensajeRead,
)
from safe_rescue.comunicacion.services.mensaje_service import MensajeService
from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content

router = APIRouter()


@router.get("", response_model=List[MensajeRead])
@handle_service_errors
def list_mensajes():
    return list_or_no_content(MensajeService.find_all())


@router.get("/{id_mensaje}", response_model=MensajeRead)
@handle_service_errors
def get_mensaje(id_mensaje: int) -> MensajeRead:
    return MensajeService.find_by_id(id_mensaje)


@router.get("/{id_mensaje}/historial", response_model=List[HistorialMensajeRead])
@handle_service_errors
def get_historial_mensaje(id_mensaje: int):
    return list_or_no_content(MensajeService.historial(id_mensaje))


@router.post("", response_model=MensajeRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_mensaje(mensaje_in: MensajeCreate) -> MensajeRead:
    return MensajeService.save(mensaje_in)


@router.patch("/{id_mensaje}/estado", response_model=MensajeRead)
@handle_service_errors
def update_estado_mensaje(id_mensaje: int, cambio: MensajeEstadoUpdate) -> MensajeRead:
    return MensajeService.actualizar_estado(id_mensaje, cambio)


@router.delete("/{id_mensaje}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_mensaje(id_mensaje: int) -> None:
    MensajeService.delete(id_mensaje)
