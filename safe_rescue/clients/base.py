"""Common request handling for the inter-service clients."""

import logging
from typing import Any, Dict, Optional

import requests

from safe_rescue.core.config import settings
from safe_rescue.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class ServiceClient:
    """Thin wrapper around ``requests.Session`` bound to one base URL.

    Subclasses set ``service_name`` and implement typed helpers on top of
    ``_request``.  Requests carry ``settings.service_auth_secret`` as a
    bearer token unless another ``api_key`` is given.
    """

    service_name = "servicio"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.api_key = api_key if api_key is not None else settings.service_auth_secret
        self.session = session or requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Any = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Optional[Any]:
        """Perform a request and return the decoded JSON body.

        Returns ``None`` when the remote answers 404 or with an empty
        body.  Raises ``ExternalServiceError`` for every other failure.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        logger.debug("Sending %s request to %s", method, url)
        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                files=files,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Request to %s failed: %s", url, exc)
            raise ExternalServiceError(
                f"Error de comunicación con el {self.service_name}",
                details={"url": url},
            ) from exc

        if response.status_code == 404:
            return None
        if response.status_code >= 400:
            logger.error("%s answered %s for %s %s", self.service_name, response.status_code, method, url)
            raise ExternalServiceError(
                f"El {self.service_name} respondió con estado {response.status_code}",
                details={"url": url, "status_code": response.status_code},
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ExternalServiceError(
                f"Respuesta inválida del {self.service_name}",
                details={"url": url},
            ) from exc
