"""Citizen endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.perfiles.schemas.usuario import CiudadanoCreate, CiudadanoRead, CiudadanoUpdate
from safe_rescue.perfiles.services.usuario_service import CiudadanoService

router = APIRouter()


@router.get("", response_model=List[CiudadanoRead])
@handle_service_errors
def list_ciudadanos():
    return list_or_no_content(CiudadanoService.find_all())


@router.get("/{id_usuario}", response_model=CiudadanoRead)
@handle_service_errors
def get_ciudadano(id_usuario: int) -> CiudadanoRead:
    return CiudadanoService.find_by_id(id_usuario)


@router.post("", response_model=CiudadanoRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_ciudadano(ciudadano_in: CiudadanoCreate) -> CiudadanoRead:
    return CiudadanoService.save(ciudadano_in)


@router.put("/{id_usuario}", response_model=CiudadanoRead)
@handle_service_errors
def update_ciudadano(id_usuario: int, ciudadano_in: CiudadanoUpdate) -> CiudadanoRead:
    return CiudadanoService.update(id_usuario, ciudadano_in)


@router.delete("/{id_usuario}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_ciudadano(id_usuario: int) -> None:
    CiudadanoService.delete(id_usuario)
