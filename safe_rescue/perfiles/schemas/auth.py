"""Schemas for citizen self-registration and login."""

from typing import Optional

from pydantic import BaseModel, Field

from .usuario import UsuarioRead


class DireccionRegistro(BaseModel):
    calle: Optional[str] = None
    numero: Optional[str] = Field(None, description="Sólo dígitos")
    villa: Optional[str] = None
    complemento: Optional[str] = None
    id_comuna: Optional[int] = None
    latitud: Optional[float] = None
    longitud: Optional[float] = None


class RegistroCiudadanoRequest(BaseModel):
    nombre_usuario: Optional[str] = Field(None, description="5 a 20 caracteres alfanuméricos")
    run: Optional[str] = None
    dv: Optional[str] = None
    nombre: Optional[str] = None
    a_paterno: Optional[str] = None
    a_materno: Optional[str] = None
    telefono: Optional[str] = None
    correo: Optional[str] = None
    contrasenia: Optional[str] = None
    direccion: Optional[DireccionRegistro] = None


class LoginRequest(BaseModel):
    correo: Optional[str] = None
    contrasenia: Optional[str] = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    tipo_perfil: str
    usuario: UsuarioRead


class TokenClaims(BaseModel):
    sub: str
    tipo_perfil: str
    id_tipo_usuario: Optional[int] = None
    exp: Optional[int] = None
