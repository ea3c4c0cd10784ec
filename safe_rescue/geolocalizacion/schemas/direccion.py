"""Schemas for coordenadas and direcciones."""

from typing import Optional

from pydantic import BaseModel, Field


class CoordenadasCreate(BaseModel):
    latitud: Optional[float] = Field(None, description="Latitud en grados decimales")
    longitud: Optional[float] = Field(None, description="Longitud en grados decimales")


class CoordenadasUpdate(CoordenadasCreate):
    """Only provided fields are updated."""


class CoordenadasRead(BaseModel):
    id_coordenadas: int
    latitud: float
    longitud: float


class DireccionCreate(BaseModel):
    """Payload for a new direccion.

    Coordinates are referenced with ``id_coordenadas`` or given inline
    in ``coordenadas``; inline coordinates are stored together with the
    direccion.
    """

    calle: Optional[str] = Field(None, description="Calle (máx. 150)")
    numero: Optional[str] = Field(None, description="Número (máx. 10)")
    villa: Optional[str] = Field(None, description="Villa o población (máx. 100)")
    complemento: Optional[str] = Field(None, description="Depto., block, etc. (máx. 50)")
    id_comuna: Optional[int] = None
    id_coordenadas: Optional[int] = None
    coordenadas: Optional[CoordenadasCreate] = None


class DireccionUpdate(BaseModel):
    """Only provided fields are updated."""

    calle: Optional[str] = None
    numero: Optional[str] = None
    villa: Optional[str] = None
    complemento: Optional[str] = None
    id_comuna: Optional[int] = None
    id_coordenadas: Optional[int] = None


class DireccionRead(BaseModel):
    id_direccion: int
    calle: str
    numero: str
    villa: Optional[str] = None
    complemento: Optional[str] = None
    id_comuna: int
    id_coordenadas: int
    coordenadas: Optional[CoordenadasRead] = None
