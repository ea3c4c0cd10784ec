"""Firefighter endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.perfiles.schemas.usuario import BomberoCreate, BomberoRead, BomberoUpdate
from safe_rescue.perfiles.services.usuario_service import BomberoService

router = APIRouter()


@router.get("", response_model=List[BomberoRead])
@handle_service_errors
def list_bomberos():
    return list_or_no_content(BomberoService.find_all())


@router.get("/{id_usuario}", response_model=BomberoRead)
@handle_service_errors
def get_bombero(id_usuario: int) -> BomberoRead:
    return BomberoService.find_by_id(id_usuario)


@router.post("", response_model=BomberoRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_bombero(bombero_in: BomberoCreate) -> BomberoRead:
    return BomberoService.save(bombero_in)


@router.put("/{id_usuario}", response_model=BomberoRead)
@handle_service_errors
def update_bombero(id_usuario: int, bombero_in: BomberoUpdate) -> BomberoRead:
    return BomberoService.update(id_usuario, bombero_in)


@router.delete("/{id_usuario}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_bombero(id_usuario: int) -> None:
    """Delete a firefighter; 409 while they lead a team."""
    BomberoService.delete(id_usuario)
