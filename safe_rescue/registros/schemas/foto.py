"""Schemas for photo metadata."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class FotoCreate(BaseModel):
    url: Optional[str] = Field(None, description="Ruta o URL de la imagen")
    fecha_subida: Optional[datetime] = None
    descripcion: Optional[str] = None
    tipo: Optional[str] = Field(None, description="Tipo MIME o categoría de la imagen")
    tamanio: Optional[int] = Field(None, description="Tamaño en bytes")


class FotoUpdate(BaseModel):
    """Only ``url``, ``tipo`` and ``descripcion`` can change."""

    url: Optional[str] = None
    descripcion: Optional[str] = None
    tipo: Optional[str] = None


class FotoRead(BaseModel):
    id_foto: int
    url: str
    fecha_subida: str
    descripcion: Optional[str] = None
    tipo: Optional[str] = None
    tamanio: Optional[int] = None


class FotoUrl(BaseModel):
    id_foto: int
    url: str
