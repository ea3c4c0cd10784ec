"""Unified entry point for the five SAFE-Rescue services.

This script launches Perfiles, Registros, Comunicación, Incidentes and
Geolocalización concurrently, each on its own port, so a development
machine or a single container only has to run one Python file.

Hosts, ports, database files and the base URLs the services use to
reach each other are read from environment variables; see
``safe_rescue/core/config.py`` for the supported names.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from safe_rescue.comunicacion.main import app as comunicacion_app
from safe_rescue.core.config import settings
from safe_rescue.core.logging_config import setup_logging
from safe_rescue.geolocalizacion.main import app as geolocalizacion_app
from safe_rescue.incidentes.main import app as incidentes_app
from safe_rescue.perfiles.main import app as perfiles_app
from safe_rescue.registros.main import app as registros_app

SERVICES = (
    ("perfiles", perfiles_app, settings.perfiles_port),
    ("registros", registros_app, settings.registros_port),
    ("comunicacion", comunicacion_app, settings.comunicacion_port),
    ("incidentes", incidentes_app, settings.incidentes_port),
    ("geolocalizacion", geolocalizacion_app, settings.geolocalizacion_port),
)


async def run_service(name: str, app, port: int) -> None:
    """Serve one application with Uvicorn until it stops."""
    config = Config(app=app, host=settings.host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.info("Starting %s on %s:%s", name, settings.host, port)
    await server.serve()


async def main() -> None:
    """Run every service concurrently; stop all when one fails."""
    setup_logging(settings.log_level, settings.log_file or None)
    tasks = [asyncio.create_task(run_service(name, app, port)) for name, app, port in SERVICES]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
