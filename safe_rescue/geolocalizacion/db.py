"""
Database of the Geolocalización service.

Holds the address hierarchy ``paises -> regiones -> comunas ->
direcciones`` plus the ``coordenadas`` each direccion points to.  Parent
rows cannot be deleted while children reference them.
"""

import sqlite3

from safe_rescue.core import db as core_db
from safe_rescue.core.config import settings

MIGRATIONS = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS paises (
            id_pais INTEGER PRIMARY KEY AUTOINCREMENT,
            nombre TEXT NOT NULL,
            codigo_iso TEXT NOT NULL UNIQUE
        );

        CREATE TABLE IF NOT EXISTS regiones (
            id_region INTEGER PRIMARY KEY AUTOINCREMENT,
            nombre TEXT NOT NULL,
            identificacion TEXT NOT NULL UNIQUE,
            id_pais INTEGER NOT NULL,
            FOREIGN KEY(id_pais) REFERENCES paises(id_pais)
        );

        CREATE TABLE IF NOT EXISTS comunas (
            id_comuna INTEGER PRIMARY KEY AUTOINCREMENT,
            nombre TEXT NOT NULL,
            codigo_postal TEXT,
            id_region INTEGER NOT NULL,
            FOREIGN KEY(id_region) REFERENCES regiones(id_region)
        );

        CREATE TABLE IF NOT EXISTS coordenadas (
            id_coordenadas INTEGER PRIMARY KEY AUTOINCREMENT,
            latitud REAL NOT NULL,
            longitud REAL NOT NULL
        );

        CREATE TABLE IF NOT EXISTS direcciones (
            id_direccion INTEGER PRIMARY KEY AUTOINCREMENT,
            calle TEXT NOT NULL,
            numero TEXT NOT NULL,
            villa TEXT,
            complemento TEXT,
            id_comuna INTEGER NOT NULL,
            id_coordenadas INTEGER NOT NULL,
            FOREIGN KEY(id_comuna) REFERENCES comunas(id_comuna),
            FOREIGN KEY(id_coordenadas) REFERENCES coordenadas(id_coordenadas)
        );
        """,
    ),
]


def get_connection() -> sqlite3.Connection:
    return core_db.get_connection(settings.geolocalizacion_database_url)


def init_db() -> int:
    return core_db.apply_migrations(settings.geolocalizacion_database_url, MIGRATIONS)
