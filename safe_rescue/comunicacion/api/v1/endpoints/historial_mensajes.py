"""Read-only history of message and notification states."""

from typing import List

from fastapi import APIRouter

from safe_rescue.comunicacion.schemas.mensaje import HistorialMensajeRead
from safe_rescue.comunicacion.services.historial_mensaje_service import HistorialMensajeService
from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content

router = APIRouter()


@router.get("", response_model=List[HistorialMensajeRead])
@handle_service_errors
def list_historial_mensajes():
    return list_or_no_content(HistorialMensajeService.find_all())
