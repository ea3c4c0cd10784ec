"""Remote services used by Incidentes."""

from safe_rescue.clients import EstadoClient, FotoClient, GeolocalizacionClient, UsuarioClient

usuarios = UsuarioClient()
estados = EstadoClient()
geolocalizacion = GeolocalizacionClient()
fotos = FotoClient()
