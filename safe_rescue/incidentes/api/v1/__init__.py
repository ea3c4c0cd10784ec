"""Version 1 of the Incidentes API, mounted under ``/api-incidentes/v1``."""
