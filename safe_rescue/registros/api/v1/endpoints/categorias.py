"""Category endpoints."""

from typing import List

from fastapi import APIRouter, Query, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.registros.schemas.catalogo import CategoriaCreate, CategoriaRead, CategoriaUpdate
from safe_rescue.registros.services.catalogo_service import CategoriaService

router = APIRouter()


@router.get("", response_model=List[CategoriaRead])
@handle_service_errors
def list_categorias():
    return list_or_no_content(CategoriaService.find_all())


@router.get("/buscar", response_model=CategoriaRead)
@handle_service_errors
def find_categoria_by_nombre(nombre: str = Query(..., description="Nombre exacto")) -> CategoriaRead:
    return CategoriaService.find_by_nombre(nombre)


@router.get("/{id_categoria}", response_model=CategoriaRead)
@handle_service_errors
def get_categoria(id_categoria: int) -> CategoriaRead:
    return CategoriaService.find_by_id(id_categoria)


@router.post("", response_model=CategoriaRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_categoria(categoria_in: CategoriaCreate) -> CategoriaRead:
    return CategoriaService.save(categoria_in)


@router.put("/{id_categoria}", response_model=CategoriaRead)
@handle_service_errors
def update_categoria(id_categoria: int, categoria_in: CategoriaUpdate) -> CategoriaRead:
    return CategoriaService.update(id_categoria, categoria_in)


@router.delete("/{id_categoria}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_categoria(id_categoria: int) -> None:
    """Delete a category; 409 while historial rows use it."""
    CategoriaService.delete(id_categoria)
