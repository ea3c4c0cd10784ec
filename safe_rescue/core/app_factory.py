"""
Assembly of a service's FastAPI application.

Every SAFE-Rescue service is built the same way: logging is
configured, the versioned router is mounted under the service prefix,
a ``/health`` probe is added and the service's migrations run at
startup.  Each service's ``main`` module calls ``build_app`` from its
own ``create_app``.
"""

import logging
from typing import Callable

from fastapi import APIRouter, FastAPI

from .config import settings
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_app(service_name: str, router: APIRouter, prefix: str, init_db: Callable[[], object]) -> FastAPI:
    """Create a configured FastAPI application for one service.

    Parameters
    ----------
    service_name : str
        Display name, appended to ``settings.project_name`` in the title.
    router : APIRouter
        Aggregated v1 router of the service.
    prefix : str
        Mount point such as ``/api-perfiles/v1``.
    init_db : Callable
        Applies the service's migrations; run on startup.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=f"{settings.project_name} {service_name}",
        version=settings.api_version,
        debug=settings.debug,
    )
    app.include_router(router, prefix=prefix)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok", "service": service_name}

    @app.on_event("startup")
    def startup_event() -> None:
        init_db()
        logger.info("%s ready under %s", service_name, prefix)

    return app
