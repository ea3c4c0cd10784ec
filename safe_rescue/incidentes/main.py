"""
Entrypoint of the Incidentes service.

Run on its own with::

    uvicorn safe_rescue.incidentes.main:app --port 8084
"""

from fastapi import FastAPI

from safe_rescue.core.app_factory import build_app

from .api.v1.router import router as v1_router
from .db import init_db

PREFIX = "/api-incidentes/v1"


def create_app() -> FastAPI:
    """Create the Incidentes application."""
    return build_app("Incidentes", v1_router, PREFIX, init_db)


app = create_app()
