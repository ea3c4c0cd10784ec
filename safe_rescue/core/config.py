"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables; defaults are provided for all fields so that a
developer can start every service locally without any setup.  Each
service owns its own SQLite database file and knows the base URLs of
the services it calls for cross‑service validation.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "SAFE-Rescue")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")
    # Shared bearer secret that services present to each other instead of
    # a user token.
    service_auth_secret: str = os.getenv("SERVICE_AUTH_SECRET", "change_me_service")

    # One SQLite file per service.  Relative paths are resolved against
    # the project root by ``core.db``.
    perfiles_database_url: str = os.getenv("PERFILES_DATABASE_URL", "perfiles.db")
    registros_database_url: str = os.getenv("REGISTROS_DATABASE_URL", "registros.db")
    comunicacion_database_url: str = os.getenv("COMUNICACION_DATABASE_URL", "comunicacion.db")
    incidentes_database_url: str = os.getenv("INCIDENTES_DATABASE_URL", "incidentes.db")
    geolocalizacion_database_url: str = os.getenv("GEOLOCALIZACION_DATABASE_URL", "geolocalizacion.db")

    # Base URLs used by the inter‑service clients.
    perfiles_url: str = os.getenv("PERFILES_URL", "http://localhost:8081/api-perfiles/v1")
    registros_url: str = os.getenv("REGISTROS_URL", "http://localhost:8082/api-registros/v1")
    geolocalizacion_url: str = os.getenv("GEOLOCALIZACION_URL", "http://localhost:8085/api-geolocalizacion/v1")
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "5"))

    # Directory where Registros stores uploaded photos.
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads/fotos")

    host: str = os.getenv("HOST", "0.0.0.0")
    perfiles_port: int = int(os.getenv("PERFILES_PORT", "8081"))
    registros_port: int = int(os.getenv("REGISTROS_PORT", "8082"))
    comunicacion_port: int = int(os.getenv("COMUNICACION_PORT", "8083"))
    incidentes_port: int = int(os.getenv("INCIDENTES_PORT", "8084"))
    geolocalizacion_port: int = int(os.getenv("GEOLOCALIZACION_PORT", "8085"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
