"""
Schemas for users and their subtypes.

The password is write-only: it is accepted by the create and update
models and never returned by the read models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UsuarioCreate(BaseModel):
    run: Optional[str] = Field(None, description="RUN sin dígito verificador (7 u 8 caracteres)")
    dv: Optional[str] = Field(None, description="Dígito verificador")
    nombre: Optional[str] = None
    a_paterno: Optional[str] = None
    a_materno: Optional[str] = None
    fecha_registro: Optional[datetime] = None
    telefono: Optional[str] = Field(None, description="Teléfono (máx. 9)")
    correo: Optional[str] = Field(None, description="Correo electrónico único (máx. 80)")
    nombre_usuario: Optional[str] = None
    contrasenia: Optional[str] = None
    intentos_fallidos: Optional[int] = None
    razon_baneo: Optional[str] = None
    dias_baneo: Optional[int] = None
    id_estado: Optional[int] = Field(None, description="Estado registrado en Registros")
    id_foto: Optional[int] = None
    id_tipo_usuario: Optional[int] = None


class UsuarioUpdate(UsuarioCreate):
    """Only provided fields are updated."""


class UsuarioRead(BaseModel):
    id_usuario: int
    run: str
    dv: str
    nombre: str
    a_paterno: str
    a_materno: str
    fecha_registro: str
    telefono: str
    correo: str
    nombre_usuario: Optional[str] = None
    intentos_fallidos: int
    razon_baneo: Optional[str] = None
    dias_baneo: Optional[int] = None
    id_estado: int
    id_foto: Optional[int] = None
    id_tipo_usuario: int


class FotoUsuarioUpdate(BaseModel):
    id_foto: Optional[int] = None


class CiudadanoCreate(UsuarioCreate):
    id_direccion: Optional[int] = Field(None, description="Dirección registrada en Geolocalización")


class CiudadanoUpdate(CiudadanoCreate):
    """Only provided fields are updated."""


class CiudadanoRead(UsuarioRead):
    id_direccion: int


class BomberoCreate(UsuarioCreate):
    id_equipo: Optional[int] = None


class BomberoUpdate(BomberoCreate):
    """Only provided fields are updated."""


class BomberoRead(UsuarioRead):
    id_equipo: int
