"""User type endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.perfiles.schemas.organizacion import TipoUsuarioCreate, TipoUsuarioRead, TipoUsuarioUpdate
from safe_rescue.perfiles.services.organizacion_service import TipoUsuarioService

router = APIRouter()


@router.get("", response_model=List[TipoUsuarioRead])
@handle_service_errors
def list_tipos_usuario():
    return list_or_no_content(TipoUsuarioService.find_all())


@router.get("/{id_tipo_usuario}", response_model=TipoUsuarioRead)
@handle_service_errors
def get_tipo_usuario(id_tipo_usuario: int) -> TipoUsuarioRead:
    return TipoUsuarioService.find_by_id(id_tipo_usuario)


@router.post("", response_model=TipoUsuarioRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_tipo_usuario(tipo_in: TipoUsuarioCreate) -> TipoUsuarioRead:
    return TipoUsuarioService.save(tipo_in)


@router.put("/{id_tipo_usuario}", response_model=TipoUsuarioRead)
@handle_service_errors
def update_tipo_usuario(id_tipo_usuario: int, tipo_in: TipoUsuarioUpdate) -> TipoUsuarioRead:
    return TipoUsuarioService.update(id_tipo_usuario, tipo_in)


@router.delete("/{id_tipo_usuario}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_tipo_usuario(id_tipo_usuario: int) -> None:
    """Delete a user type; 409 while users still have it."""
    TipoUsuarioService.delete(id_tipo_usuario)
