"""
Schemas for the rescue organisation: user types, team types,
companies and teams.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TipoUsuarioCreate(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre del tipo de usuario (máx. 50)")


class TipoUsuarioUpdate(TipoUsuarioCreate):
    """Only provided fields are updated."""


class TipoUsuarioRead(BaseModel):
    id_tipo_usuario: int
    nombre: str


class TipoEquipoCreate(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre del tipo de equipo (máx. 50)")


class TipoEquipoUpdate(TipoEquipoCreate):
    """Only provided fields are updated."""


class TipoEquipoRead(BaseModel):
    id_tipo_equipo: int
    nombre: str


class CompaniaCreate(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre único de la compañía (máx. 50)")
    id_direccion: Optional[int] = Field(None, description="Dirección registrada en Geolocalización")


class CompaniaUpdate(CompaniaCreate):
    """Only provided fields are updated."""


class CompaniaRead(BaseModel):
    id_compania: int
    nombre: str
    id_direccion: int


class EquipoCreate(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre del equipo (máx. 50)")
    id_lider: Optional[int] = Field(None, description="Bombero a cargo del equipo")
    id_compania: Optional[int] = None
    id_tipo_equipo: Optional[int] = None
    id_estado: Optional[int] = Field(None, description="Estado registrado en Registros")


class EquipoUpdate(EquipoCreate):
    """Only provided fields are updated; leader, company and type keep
    their value unless sent."""


class EquipoRead(BaseModel):
    id_equipo: int
    nombre: str
    id_lider: Optional[int] = None
    id_compania: int
    id_tipo_equipo: int
    id_estado: int
