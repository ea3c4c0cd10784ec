"""Top‑level router for version 1 of the Registros API."""

from fastapi import APIRouter

from .endpoints import categorias, estados, fotos, historial

router = APIRouter()

router.include_router(categorias.router, prefix="/categorias", tags=["categorias"])
router.include_router(estados.router, prefix="/estados", tags=["estados"])
router.include_router(historial.router, prefix="/historial", tags=["historial"])
router.include_router(fotos.router, prefix="/fotos", tags=["fotos"])
