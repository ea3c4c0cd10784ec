"""Schemas for the historial log."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class HistorialCreate(BaseModel):
    id_estado: Optional[int] = None
    id_categoria: Optional[int] = None
    detalle: Optional[str] = Field(None, description="Descripción del cambio (máx. 250)")
    fecha_historial: Optional[datetime] = Field(None, description="Por defecto, la fecha actual")


class HistorialRead(BaseModel):
    id_historial: int
    id_estado: int
    id_categoria: int
    detalle: str
    fecha_historial: str
