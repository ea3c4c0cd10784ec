"""
Top‑level router for version 1 of the Geolocalización API.

Aggregates the per-entity routers; mounted by ``main.create_app`` under
``/api-geolocalizacion/v1``.
"""

from fastapi import APIRouter

from .endpoints import comunas, coordenadas, direcciones, paises, regiones

router = APIRouter()

router.include_router(paises.router, prefix="/paises", tags=["paises"])
router.include_router(regiones.router, prefix="/regiones", tags=["regiones"])
router.include_router(comunas.router, prefix="/comunas", tags=["comunas"])
router.include_router(coordenadas.router, prefix="/coordenadas", tags=["coordenadas"])
router.include_router(direcciones.router, prefix="/direcciones", tags=["direcciones"])
