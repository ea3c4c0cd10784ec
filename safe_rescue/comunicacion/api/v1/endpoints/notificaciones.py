"""Notification endpoints."""

from typing import List

from fastapi import APIRouter, Query, status

from safe_rescue.comunicacion.schemas.notificacion import (
    NotificacionCreate,
    NotificacionesLeidas,
    NotificacionRead,
)
from safe_rescue.comunicacion.services.notificacion_service import NotificacionService
from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content

router = APIRouter()


@router.get("/usuario/{id_usuario}/pendientes", response_model=List[NotificacionRead])
@handle_service_errors
def list_pendientes(
    id_usuario: int,
    page: int = Query(0, ge=0),
    size: int = Query(20, ge=1, le=100),
):
    """Unread notifications of a user, newest first."""
    return list_or_no_content(NotificacionService.pendientes(id_usuario, page, size))


@router.patch("/usuario/{id_usuario}/leidas", response_model=NotificacionesLeidas)
@handle_service_errors
def marcar_todas_leidas(id_usuario: int) -> NotificacionesLeidas:
    return NotificacionService.marcar_todas_leidas(id_usuario)


@router.get("/{id_notificacion}", response_model=NotificacionRead)
@handle_service_errors
def get_notificacion(id_notificacion: int) -> NotificacionRead:
    return NotificacionService.find_by_id(id_notificacion)


@router.post("", response_model=NotificacionRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_notificacion(notificacion_in: NotificacionCreate) -> NotificacionRead:
    return NotificacionService.save(notificacion_in)


@router.patch("/{id_notificacion}/leida", response_model=NotificacionRead)
@handle_service_errors
def marcar_leida(id_notificacion: int) -> NotificacionRead:
    return NotificacionService.marcar_leida(id_notificacion)


@router.delete("/{id_notificacion}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_notificacion(id_notificacion: int) -> None:
    NotificacionService.delete(id_notificacion)
