"""Schemas for messages and the message/notification history."""

from typing import Optional

from pydantic import BaseModel, Field


class MensajeCreate(BaseModel):
    id_conversacion: Optional[int] = None
    id_usuario_emisor: Optional[int] = None
    id_estado: Optional[int] = None
    detalle: Optional[str] = Field(None, description="Texto del mensaje (máx. 2000)")


class MensajeEnvio(BaseModel):
    """Message sent by a participant into a conversation given in the path."""

    id_usuario_emisor: Optional[int] = None
    detalle: Optional[str] = None


class MensajeEstadoUpdate(BaseModel):
    id_estado: Optional[int] = None
    detalle: Optional[str] = Field(None, description="Motivo del cambio (máx. 255)")


class MensajeRead(BaseModel):
    id_mensaje: int
    id_conversacion: int
    id_usuario_emisor: int
    id_estado: int
    detalle: str
    fecha_creacion: str


class HistorialMensajeRead(BaseModel):
    id_historial_mensaje: int
    id_mensaje: Optional[int] = None
    id_notificacion: Optional[int] = None
    id_estado_anterior: int
    id_estado_nuevo: int
    detalle: Optional[str] = None
    fecha_historial: str
