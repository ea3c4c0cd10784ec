"""Top‑level router for version 1 of the Perfiles API.

Only ``/auth`` is public; every other router requires a user token or
the shared service secret.
"""

from fastapi import APIRouter, Depends

from safe_rescue.core.security import get_current_user

from .endpoints import (
    auth,
    bomberos,
    ciudadanos,
    companias,
    equipos,
    historial,
    tipos_equipo,
    tipos_usuario,
    usuarios,
)

router = APIRouter()
authenticated = [Depends(get_current_user)]

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(usuarios.router, prefix="/usuarios", tags=["usuarios"], dependencies=authenticated)
router.include_router(ciudadanos.router, prefix="/ciudadanos", tags=["ciudadanos"], dependencies=authenticated)
router.include_router(bomberos.router, prefix="/bomberos", tags=["bomberos"], dependencies=authenticated)
router.include_router(
    tipos_usuario.router, prefix="/tipos-usuario", tags=["tipos-usuario"], dependencies=authenticated
)
router.include_router(
    tipos_equipo.router, prefix="/tipos-equipo", tags=["tipos-equipo"], dependencies=authenticated
)
router.include_router(companias.router, prefix="/companias", tags=["companias"], dependencies=authenticated)
router.include_router(equipos.router, prefix="/equipos", tags=["equipos"], dependencies=authenticated)
router.include_router(historial.router, prefix="/historial", tags=["historial"], dependencies=authenticated)
