"""Version 1 of the Perfiles API, mounted under ``/api-perfiles/v1``."""
