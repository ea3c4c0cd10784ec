"""Database of the Registros service and its seed data."""

import sqlite3

from safe_rescue.core import db as core_db
from safe_rescue.core.config import settings

MIGRATIONS = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS categorias (
            id_categoria INTEGER PRIMARY KEY AUTOINCREMENT,
            nombre TEXT NOT NULL UNIQUE,
            descripcion TEXT
        );

        CREATE TABLE IF NOT EXISTS estados (
            id_estado INTEGER PRIMARY KEY AUTOINCREMENT,
            nombre TEXT NOT NULL UNIQUE,
            descripcion TEXT
        );

        CREATE TABLE IF NOT EXISTS historial (
            id_historial INTEGER PRIMARY KEY AUTOINCREMENT,
            id_estado INTEGER NOT NULL,
            id_categoria INTEGER NOT NULL,
            detalle TEXT NOT NULL,
            fecha_historial TEXT NOT NULL,
            FOREIGN KEY(id_estado) REFERENCES estados(id_estado),
            FOREIGN KEY(id_categoria) REFERENCES categorias(id_categoria)
        );

        CREATE TABLE IF NOT EXISTS fotos (
            id_foto INTEGER PRIMARY KEY AUTOINCREMENT,
            url TEXT NOT NULL,
            fecha_subida TEXT NOT NULL,
            descripcion TEXT,
            tipo TEXT,
            tamanio INTEGER
        );
        """,
    ),
]

# Identifiers are referenced by the other services (1 Activo for new
# users, 8 Recibido and 9 Visto for notifications).
ESTADOS = [
    (1, "Activo", "Registro activo y operativo"),
    (2, "Baneado", "Usuario suspendido"),
    (3, "Inactivo", "Registro deshabilitado"),
    (4, "En Proceso", "Incidente en atención"),
    (5, "Localizado", "Incidente localizado"),
    (6, "Cerrado", "Incidente cerrado"),
    (7, "Enviado", "Mensaje enviado"),
    (8, "Recibido", "Mensaje o notificación recibida"),
    (9, "Visto", "Mensaje o notificación leída"),
]

SEEDS = [
    ("INSERT OR IGNORE INTO estados (id_estado, nombre, descripcion) VALUES (?, ?, ?)", estado)
    for estado in ESTADOS
]


def get_connection() -> sqlite3.Connection:
    return core_db.get_connection(settings.registros_database_url)


def init_db() -> int:
    return core_db.apply_migrations(settings.registros_database_url, MIGRATIONS, SEEDS)
