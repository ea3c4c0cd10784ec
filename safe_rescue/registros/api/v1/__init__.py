"""Version 1 of the Registros API, mounted under ``/api-registros/v1``."""
