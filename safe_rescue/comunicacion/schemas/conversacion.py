"""Schemas for conversations and their participants."""

from typing import Optional

from pydantic import BaseModel, Field


class ConversacionCreate(BaseModel):
    tipo: Optional[str] = Field(None, description="Tipo de conversación, p. ej. 'Emergencia' (máx. 50)")
    nombre: Optional[str] = Field(None, description="Nombre visible (máx. 100)")


class ConversacionUpdate(ConversacionCreate):
    """Only provided fields are updated."""


class ConversacionRead(BaseModel):
    id_conversacion: int
    tipo: str
    nombre: Optional[str] = None
    fecha_creacion: str


class ParticipanteRead(BaseModel):
    id_participante_conv: int
    id_usuario: int
    id_conversacion: int
    fecha_union: str
