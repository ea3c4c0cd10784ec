"""
Top‑level package for the SAFE-Rescue backend.

The package bundles five independently deployable FastAPI services
(``perfiles``, ``registros``, ``comunicacion``, ``incidentes`` and
``geolocalizacion``) together with the pieces they share: the
configuration, logging, SQLite and error handling helpers in ``core``
and the HTTP clients each service uses to reach the others in
``clients``.

Each service subpackage exposes ``create_app`` and an ``app`` instance
in its ``main`` module, e.g.::

    uvicorn safe_rescue.perfiles.main:app --port 8081
"""

__all__ = []
