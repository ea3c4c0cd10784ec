"""Clients for the Registros service: estados and fotos."""

from typing import Any, Dict, Optional

from safe_rescue.core.config import settings
from safe_rescue.core.exceptions import ExternalServiceError

from .base import ServiceClient


class EstadoClient(ServiceClient):
    service_name = "servicio de registros"

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(base_url or settings.registros_url, **kwargs)

    def get_estado(self, id_estado: int) -> Optional[Dict[str, Any]]:
        return self._request("GET", f"/estados/{id_estado}")


class FotoClient(ServiceClient):
    service_name = "servicio de registros"

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(base_url or settings.registros_url, **kwargs)

    def subir_foto(self, filename: str, content: bytes, content_type: Optional[str] = None) -> int:
        """Upload an image and return the id of the created foto."""
        files = {"archivo": (filename, content, content_type or "application/octet-stream")}
        created = self._request("POST", "/fotos/upload", files=files)
        if not created or "id_foto" not in created:
            raise ExternalServiceError("El servicio de registros no devolvió la foto creada")
        return int(created["id_foto"])
