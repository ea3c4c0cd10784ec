"""
Entrypoint of the Geolocalización service.

Run on its own with::

    uvicorn safe_rescue.geolocalizacion.main:app --port 8085
"""

from fastapi import FastAPI

from safe_rescue.core.app_factory import build_app

from .api.v1.router import router as v1_router
from .db import init_db

PREFIX = "/api-geolocalizacion/v1"


def create_app() -> FastAPI:
    """Create the Geolocalización application."""
    return build_app("Geolocalización", v1_router, PREFIX, init_db)


app = create_app()
