"""Schemas for notifications."""

from typing import Optional

from pydantic import BaseModel, Field


class NotificacionCreate(BaseModel):
    id_conversacion: Optional[int] = None
    id_usuario_receptor: Optional[str] = Field(None, description="Identificador numérico del usuario receptor")
    detalle: Optional[str] = Field(None, description="Texto de la notificación (máx. 255)")


class NotificacionRead(BaseModel):
    id_notificacion: int
    id_conversacion: int
    id_usuario_receptor: str
    id_estado: int
    detalle: str
    fecha_creacion: str


class NotificacionesLeidas(BaseModel):
    id_usuario_receptor: str
    actualizadas: int
