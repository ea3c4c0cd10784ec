"""Remote services used by Comunicación."""

from safe_rescue.clients import EstadoClient, UsuarioClient

usuarios = UsuarioClient()
estados = EstadoClient()
