"""
Schemas for the administrative hierarchy: paises, regiones, comunas.

Create models accept every field as optional so that missing values
reach the service layer and are reported with a 400 and a readable
message instead of a generic validation payload.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PaisCreate(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre del país (máx. 50)")
    codigo_iso: Optional[str] = Field(None, description="Código ISO alfa-3, exactamente 3 caracteres")


class PaisUpdate(PaisCreate):
    """Only provided fields are updated."""


class PaisRead(BaseModel):
    id_pais: int
    nombre: str
    codigo_iso: str


class RegionCreate(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre de la región (máx. 100)")
    identificacion: Optional[str] = Field(None, description="Identificador corto único, p. ej. 'RM' (máx. 5)")
    id_pais: Optional[int] = Field(None, description="País al que pertenece")


class RegionUpdate(RegionCreate):
    """Only provided fields are updated."""


class RegionRead(BaseModel):
    id_region: int
    nombre: str
    identificacion: str
    id_pais: int


class ComunaCreate(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre de la comuna (máx. 100)")
    codigo_postal: Optional[str] = Field(None, description="Código postal (máx. 10)")
    id_region: Optional[int] = Field(None, description="Región a la que pertenece")


class ComunaUpdate(ComunaCreate):
    """Only provided fields are updated."""


class ComunaRead(BaseModel):
    id_comuna: int
    nombre: str
    codigo_postal: Optional[str] = None
    id_region: int
