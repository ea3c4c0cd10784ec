"""
Entrypoint of the Perfiles service.

Run on its own with::

    uvicorn safe_rescue.perfiles.main:app --port 8081
"""

from fastapi import FastAPI

from safe_rescue.core.app_factory import build_app

from .api.v1.router import router as v1_router
from .db import init_db

PREFIX = "/api-perfiles/v1"


def create_app() -> FastAPI:
    """Create the Perfiles application."""
    return build_app("Perfiles", v1_router, PREFIX, init_db)


app = create_app()
