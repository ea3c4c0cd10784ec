"""Version 1 of the Comunicación API, mounted under ``/api-comunicaciones/v1``."""
