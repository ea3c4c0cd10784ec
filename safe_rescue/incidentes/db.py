"""
Database of the Incidentes service.

An incident keeps the ids of rows owned by other services (citizen,
assigned user, state, address, photo) as plain integers; only the
incident type is a local foreign key.
"""

import sqlite3

from safe_rescue.core import db as core_db
from safe_rescue.core.config import settings

MIGRATIONS = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS tipos_incidente (
            id_tipo_incidente INTEGER PRIMARY KEY AUTOINCREMENT,
            nombre TEXT NOT NULL UNIQUE
        );

        CREATE TABLE IF NOT EXISTS incidentes (
            id_incidente INTEGER PRIMARY KEY AUTOINCREMENT,
            titulo TEXT NOT NULL,
            detalle TEXT NOT NULL,
            fecha_registro TEXT NOT NULL,
            fecha_ultima_actualizacion TEXT,
            region TEXT,
            comuna TEXT,
            direccion TEXT,
            id_tipo_incidente INTEGER NOT NULL,
            id_ciudadano INTEGER NOT NULL,
            id_estado_incidente INTEGER NOT NULL,
            id_usuario_asignado INTEGER,
            id_direccion INTEGER NOT NULL,
            id_foto INTEGER,
            FOREIGN KEY(id_tipo_incidente) REFERENCES tipos_incidente(id_tipo_incidente)
        );

        CREATE TABLE IF NOT EXISTS historial_incidentes (
            id_historial INTEGER PRIMARY KEY AUTOINCREMENT,
            id_incidente INTEGER NOT NULL,
            id_estado_anterior INTEGER,
            id_estado_nuevo INTEGER,
            fecha_historial TEXT NOT NULL,
            detalle TEXT,
            FOREIGN KEY(id_incidente) REFERENCES incidentes(id_incidente) ON DELETE CASCADE
        );
        """,
    ),
]

TIPOS_INCIDENTE = (
    "Incendio Estructural",
    "Incendio Forestal",
    "Accidente Vehicular",
    "Rescate Animal",
    "Escape de Gas",
)

SEEDS = [
    ("INSERT OR IGNORE INTO tipos_incidente (id_tipo_incidente, nombre) VALUES (?, ?)", (i, nombre))
    for i, nombre in enumerate(TIPOS_INCIDENTE, start=1)
]


def get_connection() -> sqlite3.Connection:
    return core_db.get_connection(settings.incidentes_database_url)


def init_db() -> int:
    return core_db.apply_migrations(settings.incidentes_database_url, MIGRATIONS, SEEDS)
