"""Conversation membership endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.comunicacion.schemas.conversacion import ParticipanteRead
from safe_rescue.comunicacion.services.conversacion_service import ParticipanteService
from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content

router = APIRouter()


@router.get("/conversacion/{id_conversacion}", response_model=List[ParticipanteRead])
@handle_service_errors
def list_participantes(id_conversacion: int):
    return list_or_no_content(ParticipanteService.find_by_conversacion(id_conversacion))


@router.get("/usuario/{id_usuario}", response_model=List[ParticipanteRead])
@handle_service_errors
def list_conversaciones_usuario(id_usuario: int):
    """Memberships of a user, latest join first."""
    return list_or_no_content(ParticipanteService.find_by_usuario(id_usuario))


@router.post(
    "/{id_conversacion}/usuario/{id_usuario}",
    response_model=ParticipanteRead,
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
def unirse(id_conversacion: int, id_usuario: int) -> ParticipanteRead:
    return ParticipanteService.unirse(id_conversacion, id_usuario)


@router.delete("/{id_conversacion}/usuario/{id_usuario}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def salir(id_conversacion: int, id_usuario: int) -> None:
    ParticipanteService.salir(id_conversacion, id_usuario)
