"""Conversation endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from safe_rescue.comunicacion.schemas.conversacion import (
    ConversacionCreate,
    ConversacionRead,
    ConversacionUpdate,
)
from safe_rescue.comunicacion.schemas.mensaje import MensajeEnvio, MensajeRead
from safe_rescue.comunicacion.services.conversacion_service import ConversacionService
from safe_rescue.comunicacion.services.mensaje_service import MensajeService
from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content

router = APIRouter()


@router.get("", response_model=List[ConversacionRead])
@handle_service_errors
def list_conversaciones(tipo: Optional[str] = Query(None, description="Filtrar por tipo")):
    """Return conversations, newest first."""
    if tipo:
        return list_or_no_content(ConversacionService.find_by_tipo(tipo))
    return list_or_no_content(ConversacionService.find_all())


@router.get("/{id_conversacion}", response_model=ConversacionRead)
@handle_service_errors
def get_conversacion(id_conversacion: int) -> ConversacionRead:
    return ConversacionService.find_by_id(id_conversacion)


@router.get("/{id_conversacion}/mensajes", response_model=List[MensajeRead])
@handle_service_errors
def list_mensajes_conversacion(
    id_conversacion: int,
    page: int = Query(0, ge=0),
    size: int = Query(20, ge=1, le=100),
):
    return list_or_no_content(MensajeService.find_by_conversacion(id_conversacion, page, size))


@router.post("", response_model=ConversacionRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_conversacion(conversacion_in: ConversacionCreate) -> ConversacionRead:
    return ConversacionService.save(conversacion_in)


@router.post(
    "/{id_conversacion}/enviar",
    response_model=MensajeRead,
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
def enviar_mensaje(id_conversacion: int, envio: MensajeEnvio) -> MensajeRead:
    """Post a message; 409 when the sender is not a participant."""
    return MensajeService.enviar(id_conversacion, envio)


@router.put("/{id_conversacion}", response_model=ConversacionRead)
@handle_service_errors
def update_conversacion(id_conversacion: int, conversacion_in: ConversacionUpdate) -> ConversacionRead:
    return ConversacionService.update(id_conversacion, conversacion_in)


@router.delete("/{id_conversacion}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_conversacion(id_conversacion: int) -> None:
    """Delete a conversation with its participants, messages and notifications."""
    ConversacionService.delete(id_conversacion)
