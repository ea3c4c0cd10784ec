"""
Entrypoint of the Comunicación service.

Run on its own with::

    uvicorn safe_rescue.comunicacion.main:app --port 8083
"""

from fastapi import FastAPI

from safe_rescue.core.app_factory import build_app

from .api.v1.router import router as v1_router
from .db import init_db

PREFIX = "/api-comunicaciones/v1"


def create_app() -> FastAPI:
    """Create the Comunicación application."""
    return build_app("Comunicación", v1_router, PREFIX, init_db)


app = create_app()
