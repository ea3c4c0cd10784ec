"""
Remote services used by Perfiles.

Module-level instances so that tests can replace them with
``monkeypatch.setattr(clients, "estados", fake)``.
"""

from safe_rescue.clients import EstadoClient, FotoClient, GeolocalizacionClient

geolocalizacion = GeolocalizacionClient()
estados = EstadoClient()
fotos = FotoClient()
