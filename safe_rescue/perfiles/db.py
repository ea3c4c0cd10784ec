"""
Database of the Perfiles service.

``usuarios`` holds every person; ``ciudadanos`` and ``bomberos`` extend
a user row with the subtype specific column and disappear with it.
``historial_usuarios`` records state transitions of users and teams.
"""

import sqlite3

from safe_rescue.core import db as core_db
from safe_rescue.core.config import settings

MIGRATIONS = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS tipos_usuario (
            id_tipo_usuario INTEGER PRIMARY KEY AUTOINCREMENT,
            nombre TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS tipos_equipo (
            id_tipo_equipo INTEGER PRIMARY KEY AUTOINCREMENT,
            nombre TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS companias (
            id_compania INTEGER PRIMARY KEY AUTOINCREMENT,
            nombre TEXT NOT NULL UNIQUE,
            id_direccion INTEGER NOT NULL
        );

        CREATE TABLE IF NOT EXISTS usuarios (
            id_usuario INTEGER PRIMARY KEY AUTOINCREMENT,
            run TEXT NOT NULL UNIQUE,
            dv TEXT NOT NULL,
            nombre TEXT NOT NULL,
            a_paterno TEXT NOT NULL,
            a_materno TEXT NOT NULL,
            fecha_registro TEXT NOT NULL,
            telefono TEXT NOT NULL UNIQUE,
            correo TEXT NOT NULL UNIQUE,
            nombre_usuario TEXT UNIQUE,
            contrasenia TEXT NOT NULL,
            intentos_fallidos INTEGER NOT NULL DEFAULT 0,
            razon_baneo TEXT,
            dias_baneo INTEGER,
            id_estado INTEGER NOT NULL,
            id_foto INTEGER,
            id_tipo_usuario INTEGER NOT NULL,
            FOREIGN KEY(id_tipo_usuario) REFERENCES tipos_usuario(id_tipo_usuario)
        );

        CREATE TABLE IF NOT EXISTS equipos (
            id_equipo INTEGER PRIMARY KEY AUTOINCREMENT,
            nombre TEXT NOT NULL,
            id_lider INTEGER,
            id_compania INTEGER NOT NULL,
            id_tipo_equipo INTEGER NOT NULL,
            id_estado INTEGER NOT NULL,
            FOREIGN KEY(id_lider) REFERENCES usuarios(id_usuario),
            FOREIGN KEY(id_compania) REFERENCES companias(id_compania),
            FOREIGN KEY(id_tipo_equipo) REFERENCES tipos_equipo(id_tipo_equipo)
        );

        CREATE TABLE IF NOT EXISTS ciudadanos (
            id_usuario INTEGER PRIMARY KEY,
            id_direccion INTEGER NOT NULL,
            FOREIGN KEY(id_usuario) REFERENCES usuarios(id_usuario) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS bomberos (
            id_usuario INTEGER PRIMARY KEY,
            id_equipo INTEGER NOT NULL,
            FOREIGN KEY(id_usuario) REFERENCES usuarios(id_usuario) ON DELETE CASCADE,
            FOREIGN KEY(id_equipo) REFERENCES equipos(id_equipo)
        );

        CREATE TABLE IF NOT EXISTS historial_usuarios (
            id_historial INTEGER PRIMARY KEY AUTOINCREMENT,
            id_usuario INTEGER,
            id_equipo INTEGER,
            id_estado_anterior INTEGER NOT NULL,
            id_estado_nuevo INTEGER NOT NULL,
            fecha_historial TEXT NOT NULL,
            detalle TEXT NOT NULL,
            FOREIGN KEY(id_usuario) REFERENCES usuarios(id_usuario),
            FOREIGN KEY(id_equipo) REFERENCES equipos(id_equipo)
        );
        """,
    ),
]

# Identifiers referenced in code: 5 is the type given to self-registered
# citizens.
TIPOS_USUARIO = [
    (1, "Jefe de Compañía"),
    (2, "Bombero"),
    (3, "Operador"),
    (4, "Administrador"),
    (5, "Ciudadano"),
]

TIPOS_EQUIPO = [
    (1, "Médico"),
    (2, "Administrativo"),
    (3, "Forestales"),
    (4, "Rescate Urbano"),
    (5, "Materiales Peligrosos"),
    (6, "Alturas"),
    (7, "Subacuático"),
    (8, "Logístico"),
]

SEEDS = [
    ("INSERT OR IGNORE INTO tipos_usuario (id_tipo_usuario, nombre) VALUES (?, ?)", tipo)
    for tipo in TIPOS_USUARIO
] + [
    ("INSERT OR IGNORE INTO tipos_equipo (id_tipo_equipo, nombre) VALUES (?, ?)", tipo)
    for tipo in TIPOS_EQUIPO
]


def get_connection() -> sqlite3.Connection:
    return core_db.get_connection(settings.perfiles_database_url)


def init_db() -> int:
    return core_db.apply_migrations(settings.perfiles_database_url, MIGRATIONS, SEEDS)
