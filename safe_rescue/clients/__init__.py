"""
HTTP clients for calls between SAFE-Rescue services.

Each client wraps one remote service with a ``requests.Session``.  A
remote 404 is returned as ``None`` so that callers decide which
domain error applies; network failures, timeouts and any other error
status raise ``ExternalServiceError``.
"""

from .base import ServiceClient
from .geolocalizacion import GeolocalizacionClient
from .perfiles import UsuarioClient
from .registros import EstadoClient, FotoClient

__all__ = ["ServiceClient", "GeolocalizacionClient", "UsuarioClient", "EstadoClient", "FotoClient"]
