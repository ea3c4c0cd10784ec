"""Top‑level router for version 1 of the Comunicación API."""

from fastapi import APIRouter

from .endpoints import conversaciones, historial_mensajes, mensajes, notificaciones, participantes

router = APIRouter()

router.include_router(conversaciones.router, prefix="/conversaciones", tags=["conversaciones"])
router.include_router(participantes.router, prefix="/participantes", tags=["participantes"])
router.include_router(mensajes.router, prefix="/mensajes", tags=["mensajes"])
router.include_router(notificaciones.router, prefix="/notificaciones", tags=["notificaciones"])
router.include_router(historial_mensajes.router, prefix="/historial-mensajes", tags=["historial"])
