"""
Schemas for the two catalogue tables, categorias and estados.

Both share the same shape: a unique ``nombre`` of at most 50
characters and an optional ``descripcion`` of at most 100.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CategoriaCreate(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre único de la categoría")
    descripcion: Optional[str] = None


class CategoriaUpdate(CategoriaCreate):
    """Only provided fields are updated."""


class CategoriaRead(BaseModel):
    id_categoria: int
    nombre: str
    descripcion: Optional[str] = None


class EstadoCreate(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre único del estado")
    descripcion: Optional[str] = None


class EstadoUpdate(EstadoCreate):
    """Only provided fields are updated."""


class EstadoRead(BaseModel):
    id_estado: int
    nombre: str
    descripcion: Optional[str] = None
