"""Top‑level router for version 1 of the Incidentes API."""

from fastapi import APIRouter

from .endpoints import historial, incidentes, tipos_incidente

router = APIRouter()

router.include_router(incidentes.router, prefix="/incidentes", tags=["incidentes"])
router.include_router(tipos_incidente.router, prefix="/tipos-incidente", tags=["tipos-incidente"])
router.include_router(historial.router, prefix="/historial", tags=["historial"])
