"""Read-only access to the user and team audit trail."""

from typing import List

from fastapi import APIRouter

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.perfiles.schemas.historial import HistorialUsuarioRead
from safe_rescue.perfiles.services.historial_service import HistorialUsuarioService

router = APIRouter()


@router.get("", response_model=List[HistorialUsuarioRead])
@handle_service_errors
def list_historial():
    return list_or_no_content(HistorialUsuarioService.find_all())


@router.get("/usuario/{id_usuario}", response_model=List[HistorialUsuarioRead])
@handle_service_errors
def list_historial_by_usuario(id_usuario: int):
    return list_or_no_content(HistorialUsuarioService.find_by_usuario(id_usuario))


@router.get("/equipo/{id_equipo}", response_model=List[HistorialUsuarioRead])
@handle_service_errors
def list_historial_by_equipo(id_equipo: int):
    return list_or_no_content(HistorialUsuarioService.find_by_equipo(id_equipo))
