"""
Database of the Comunicación service.

Deleting a conversation removes its participants, messages and
notifications; deleting a message or notification removes its history.
"""

import sqlite3

from safe_rescue.core import db as core_db
from safe_rescue.core.config import settings

MIGRATIONS = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS conversaciones (
            id_conversacion INTEGER PRIMARY KEY AUTOINCREMENT,
            tipo TEXT NOT NULL,
            nombre TEXT,
            fecha_creacion TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS participantes_conversacion (
            id_participante_conv INTEGER PRIMARY KEY AUTOINCREMENT,
            id_usuario INTEGER NOT NULL,
            id_conversacion INTEGER NOT NULL,
            fecha_union TEXT NOT NULL,
            UNIQUE(id_usuario, id_conversacion),
            FOREIGN KEY(id_conversacion) REFERENCES conversaciones(id_conversacion) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS mensajes (
            id_mensaje INTEGER PRIMARY KEY AUTOINCREMENT,
            id_conversacion INTEGER NOT NULL,
            id_usuario_emisor INTEGER NOT NULL,
            id_estado INTEGER NOT NULL,
            detalle TEXT NOT NULL,
            fecha_creacion TEXT NOT NULL,
            FOREIGN KEY(id_conversacion) REFERENCES conversaciones(id_conversacion) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS notificaciones (
            id_notificacion INTEGER PRIMARY KEY AUTOINCREMENT,
            id_conversacion INTEGER NOT NULL,
            id_usuario_receptor TEXT NOT NULL,
            id_estado INTEGER NOT NULL,
            detalle TEXT NOT NULL,
            fecha_creacion TEXT NOT NULL,
            FOREIGN KEY(id_conversacion) REFERENCES conversaciones(id_conversacion) ON DELETE CASCADE
        );

        CREATE INDEX IF NOT EXISTS idx_notificaciones_receptor_estado
            ON notificaciones (id_usuario_receptor, id_estado);

        CREATE TABLE IF NOT EXISTS historial_mensajes (
            id_historial_mensaje INTEGER PRIMARY KEY AUTOINCREMENT,
            id_mensaje INTEGER,
            id_notificacion INTEGER,
            id_estado_anterior INTEGER NOT NULL,
            id_estado_nuevo INTEGER NOT NULL,
            detalle TEXT,
            fecha_historial TEXT NOT NULL,
            FOREIGN KEY(id_mensaje) REFERENCES mensajes(id_mensaje) ON DELETE CASCADE,
            FOREIGN KEY(id_notificacion) REFERENCES notificaciones(id_notificacion) ON DELETE CASCADE
        );
        """,
    ),
]


def get_connection() -> sqlite3.Connection:
    return core_db.get_connection(settings.comunicacion_database_url)


def init_db() -> int:
    return core_db.apply_migrations(settings.comunicacion_database_url, MIGRATIONS)
