"""
User endpoints.

Besides the CRUD routes, users support a partial update that ignores
empty fields, setting the profile photo by id, and uploading a photo
which is stored by Registros.  ``GET /usuarios/{id}`` is the lookup
Comunicación and Incidentes use to check user ids; listing every user
is reserved to administrators.
"""

from typing import List

from fastapi import APIRouter, Depends, File, UploadFile, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.core.security import require_tipos_usuario
from safe_rescue.perfiles.schemas.usuario import FotoUsuarioUpdate, UsuarioCreate, UsuarioRead, UsuarioUpdate
from safe_rescue.perfiles.services.usuario_service import TIPO_USUARIO_ADMINISTRADOR, UsuarioService

router = APIRouter()


@router.get(
    "",
    response_model=List[UsuarioRead],
    dependencies=[Depends(require_tipos_usuario(TIPO_USUARIO_ADMINISTRADOR))],
)
@handle_service_errors
def list_usuarios():
    """List every user; administrators only."""
    return list_or_no_content(UsuarioService.find_all())


@router.get("/{id_usuario}", response_model=UsuarioRead)
@handle_service_errors
def get_usuario(id_usuario: int) -> UsuarioRead:
    return UsuarioService.find_by_id(id_usuario)


@router.post("", response_model=UsuarioRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_usuario(usuario_in: UsuarioCreate) -> UsuarioRead:
    """Create a user.

    RUN, telefono, correo and nombre de usuario are unique; a duplicate
    answers 400 with a fixed integrity message.
    """
    return UsuarioService.save(usuario_in)


@router.put("/{id_usuario}", response_model=UsuarioRead)
@handle_service_errors
def update_usuario(id_usuario: int, usuario_in: UsuarioUpdate) -> UsuarioRead:
    return UsuarioService.update(id_usuario, usuario_in)


@router.patch("/{id_usuario}", response_model=UsuarioRead)
@handle_service_errors
def patch_usuario(id_usuario: int, usuario_in: UsuarioUpdate) -> UsuarioRead:
    """Apply only non-empty fields; 409 when the new correo or
    nombre de usuario belongs to someone else."""
    return UsuarioService.partial_update(id_usuario, usuario_in)


@router.patch("/{id_usuario}/foto", response_model=UsuarioRead)
@handle_service_errors
def update_foto_usuario(id_usuario: int, foto_in: FotoUsuarioUpdate) -> UsuarioRead:
    return UsuarioService.update_foto(id_usuario, foto_in.id_foto)


@router.post("/{id_usuario}/subir-foto", response_model=UsuarioRead)
@handle_service_errors
def upload_foto_usuario(id_usuario: int, archivo: UploadFile = File(...)) -> UsuarioRead:
    content = archivo.file.read()
    return UsuarioService.subir_foto(id_usuario, archivo.filename, content, archivo.content_type)


@router.delete("/{id_usuario}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_usuario(id_usuario: int) -> None:
    UsuarioService.delete(id_usuario)
