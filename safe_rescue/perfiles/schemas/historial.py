"""Schemas for the user and team audit trail."""

from typing import Optional

from pydantic import BaseModel


class HistorialUsuarioRead(BaseModel):
    id_historial: int
    id_usuario: Optional[int] = None
    id_equipo: Optional[int] = None
    id_estado_anterior: int
    id_estado_nuevo: int
    fecha_historial: str
    detalle: str
