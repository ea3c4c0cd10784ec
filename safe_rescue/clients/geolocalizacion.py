"""Client for the Geolocalización service."""

from typing import Any, Dict, Optional

from safe_rescue.core.config import settings
from safe_rescue.core.exceptions import ExternalServiceError

from .base import ServiceClient


class GeolocalizacionClient(ServiceClient):
    service_name = "servicio de geolocalización"

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(base_url or settings.geolocalizacion_url, **kwargs)

    def get_direccion(self, id_direccion: int) -> Optional[Dict[str, Any]]:
        """Return the direccion or ``None`` when it does not exist."""
        return self._request("GET", f"/direcciones/{id_direccion}")

    def crear_direccion(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create a direccion (with nested coordenadas) and return it."""
        created = self._request("POST", "/direcciones", json_body=payload)
        if not created or "id_direccion" not in created:
            raise ExternalServiceError("El servicio de geolocalización no devolvió la dirección creada")
        return created
