"""Version 1 of the Geolocalización API, mounted under ``/api-geolocalizacion/v1``."""
