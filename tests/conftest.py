"""
Shared test fixtures for the SAFE-Rescue services.

Provides: one temporary SQLite file per service, fake remote clients
patched into every service, and a ``TestClient`` per application.
Dependencies: pytest, fastapi (TestClient over httpx)
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from safe_rescue.comunicacion import clients as comunicacion_clients
from safe_rescue.core.config import settings
from safe_rescue.core.security import create_access_token
from safe_rescue.incidentes import clients as incidentes_clients
from safe_rescue.perfiles import clients as perfiles_clients

SERVICES = ("perfiles", "registros", "comunicacion", "incidentes", "geolocalizacion")

ESTADOS = {
    1: "Activo",
    2: "Baneado",
    3: "Inactivo",
    4: "En Proceso",
    5: "Localizado",
    6: "Cerrado",
    7: "Enviado",
    8: "Recibido",
    9: "Visto",
}


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point every service database and the upload directory at ``tmp_path``."""
    for name in SERVICES:
        monkeypatch.setattr(settings, f"{name}_database_url", str(tmp_path / f"{name}.db"))
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path / "fotos"))
    return settings


@pytest.fixture
def remote(monkeypatch):
    """
    Fake Perfiles, Registros and Geolocalización clients.

    Lookups read from ``remote.data``; tests add or remove rows there.

    Returns:
        SimpleNamespace: ``data`` plus the ``usuarios``, ``estados``,
        ``geolocalizacion`` and ``fotos`` mocks.
    """
    data = SimpleNamespace(
        usuarios={
            1: {"id_usuario": 1, "nombre": "Ana"},
            2: {"id_usuario": 2, "nombre": "Bruno"},
            3: {"id_usuario": 3, "nombre": "Carla"},
        },
        estados={id_estado: {"id_estado": id_estado, "nombre": nombre} for id_estado, nombre in ESTADOS.items()},
        direcciones={1: {"id_direccion": 1, "calle": "Alameda", "numero": "100"}},
    )

    def crear_direccion(payload):
        id_direccion = max(data.direcciones) + 1
        created = {**payload, "id_direccion": id_direccion}
        data.direcciones[id_direccion] = created
        return created

    usuarios = MagicMock()
    usuarios.get_usuario.side_effect = lambda id_usuario: data.usuarios.get(id_usuario)
    estados = MagicMock()
    estados.get_estado.side_effect = lambda id_estado: data.estados.get(id_estado)
    geolocalizacion = MagicMock()
    geolocalizacion.get_direccion.side_effect = lambda id_direccion: data.direcciones.get(id_direccion)
    geolocalizacion.crear_direccion.side_effect = crear_direccion
    fotos = MagicMock()
    fotos.subir_foto.return_value = 42

    fakes = {
        "usuarios": usuarios,
        "estados": estados,
        "geolocalizacion": geolocalizacion,
        "fotos": fotos,
    }
    for module in (perfiles_clients, comunicacion_clients, incidentes_clients):
        for name, fake in fakes.items():
            if hasattr(module, name):
                monkeypatch.setattr(module, name, fake)
    return SimpleNamespace(data=data, **fakes)


@pytest.fixture
def geolocalizacion_db():
    from safe_rescue.geolocalizacion.db import init_db

    init_db()


@pytest.fixture
def registros_db():
    from safe_rescue.registros.db import init_db

    init_db()


@pytest.fixture
def perfiles_db(remote):
    from safe_rescue.perfiles.db import init_db

    init_db()


@pytest.fixture
def comunicacion_db(remote):
    from safe_rescue.comunicacion.db import init_db

    init_db()


@pytest.fixture
def incidentes_db(remote):
    from safe_rescue.incidentes.db import init_db

    init_db()


@pytest.fixture
def geolocalizacion_api(geolocalizacion_db):
    from safe_rescue.geolocalizacion.main import create_app

    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def registros_api(registros_db):
    from safe_rescue.registros.main import create_app

    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def perfiles_anon_api(perfiles_db):
    """Perfiles client without credentials."""
    from safe_rescue.perfiles.main import create_app

    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def perfiles_api(perfiles_anon_api):
    """Perfiles client authenticated as an administrator."""
    token = create_access_token({"sub": "1", "tipo_perfil": "USUARIO", "id_tipo_usuario": 4})
    perfiles_anon_api.headers["Authorization"] = f"Bearer {token}"
    yield perfiles_anon_api
    perfiles_anon_api.headers.pop("Authorization", None)


@pytest.fixture
def comunicacion_api(comunicacion_db):
    from safe_rescue.comunicacion.main import create_app

    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def incidentes_api(incidentes_db):
    from safe_rescue.incidentes.main import create_app

    with TestClient(create_app()) as client:
        yield client
