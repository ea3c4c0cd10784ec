"""Schemas for incident types, incidents and their history."""

from typing import Optional

from pydantic import BaseModel, Field


class TipoIncidenteCreate(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre único (máx. 50)")


class TipoIncidenteUpdate(TipoIncidenteCreate):
    """Only provided fields are updated."""


class TipoIncidenteRead(BaseModel):
    id_tipo_incidente: int
    nombre: str


class IncidenteCreate(BaseModel):
    titulo: Optional[str] = Field(None, description="Máx. 50 caracteres")
    detalle: Optional[str] = Field(None, description="Máx. 400 caracteres")
    fecha_registro: Optional[str] = Field(None, description="ISO 8601; ahora si se omite")
    region: Optional[str] = None
    comuna: Optional[str] = None
    direccion: Optional[str] = Field(None, description="Dirección en texto libre (máx. 200)")
    id_tipo_incidente: Optional[int] = None
    id_ciudadano: Optional[int] = None
    id_estado_incidente: Optional[int] = None
    id_usuario_asignado: Optional[int] = None
    id_direccion: Optional[int] = None
    id_foto: Optional[int] = None


class IncidenteUpdate(IncidenteCreate):
    """Only provided fields are updated."""


class IncidenteRead(BaseModel):
    id_incidente: int
    titulo: str
    detalle: str
    fecha_registro: str
    fecha_ultima_actualizacion: Optional[str] = None
    region: Optional[str] = None
    comuna: Optional[str] = None
    direccion: Optional[str] = None
    id_tipo_incidente: int
    id_ciudadano: int
    id_estado_incidente: int
    id_usuario_asignado: Optional[int] = None
    id_direccion: int
    id_foto: Optional[int] = None


class FotoIncidenteUpdate(BaseModel):
    id_foto: Optional[int] = None


class UbicacionIncidente(BaseModel):
    """Address created in Geolocalización and linked to the incident."""

    calle: Optional[str] = None
    numero: Optional[str] = None
    villa: Optional[str] = None
    complemento: Optional[str] = None
    id_comuna: Optional[int] = None
    latitud: Optional[float] = None
    longitud: Optional[float] = None


class HistorialIncidenteRead(BaseModel):
    id_historial: int
    id_incidente: int
    id_estado_anterior: Optional[int] = None
    id_estado_nuevo: Optional[int] = None
    fecha_historial: str
    detalle: Optional[str] = None
