"""
Entrypoint of the Registros service.

Run on its own with::

    uvicorn safe_rescue.registros.main:app --port 8082
"""

from fastapi import FastAPI

from safe_rescue.core.app_factory import build_app

from .api.v1.router import router as v1_router
from .db import init_db

PREFIX = "/api-registros/v1"


def create_app() -> FastAPI:
    """Create the Registros application."""
    return build_app("Registros", v1_router, PREFIX, init_db)


app = create_app()
