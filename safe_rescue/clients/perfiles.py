"""Client for the Perfiles service."""

from typing import Any, Dict, Optional

from safe_rescue.core.config import settings

from .base import ServiceClient


class UsuarioClient(ServiceClient):
    service_name = "servicio de perfiles"

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(base_url or settings.perfiles_url, **kwargs)

    def get_usuario(self, id_usuario: int) -> Optional[Dict[str, Any]]:
        return self._request("GET", f"/usuarios/{id_usuario}")
