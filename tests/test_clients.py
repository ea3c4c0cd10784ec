"""Tests for the inter-service HTTP clients, with a mocked ``requests.Session``."""

from unittest.mock import MagicMock

import pytest
import requests

from safe_rescue.clients import EstadoClient, FotoClient, GeolocalizacionClient, UsuarioClient
from safe_rescue.core.config import settings
from safe_rescue.core.exceptions import ExternalServiceError


def make_response(status_code=200, payload=None, content=b"{}"):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


class TestServiceClient:
    def test_get_returns_decoded_body(self, session):
        # Arrange
        session.request.return_value = make_response(payload={"id_estado": 1, "nombre": "Activo"})
        client = EstadoClient("http://registros/api-registros/v1/", session=session, timeout=2)

        # Act
        estado = client.get_estado(1)

        # Assert
        assert estado["nombre"] == "Activo"
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://registros/api-registros/v1/estados/1"
        assert kwargs["timeout"] == 2

    def test_not_found_returns_none(self, session):
        session.request.return_value = make_response(status_code=404)
        client = UsuarioClient("http://perfiles", session=session)

        assert client.get_usuario(99) is None

    def test_server_error_raises(self, session):
        session.request.return_value = make_response(status_code=500)
        client = GeolocalizacionClient("http://geo", session=session)

        with pytest.raises(ExternalServiceError) as exc_info:
            client.get_direccion(1)

        assert exc_info.value.details["status_code"] == 500

    def test_connection_error_raises(self, session):
        session.request.side_effect = requests.ConnectionError("refused")
        client = UsuarioClient("http://perfiles", session=session)

        with pytest.raises(ExternalServiceError):
            client.get_usuario(1)

    def test_invalid_json_raises(self, session):
        response = make_response(content=b"<html>")
        response.json.side_effect = ValueError("no json")
        session.request.return_value = response
        client = EstadoClient("http://registros", session=session)

        with pytest.raises(ExternalServiceError):
            client.get_estado(1)

    def test_api_key_is_sent_as_bearer(self, session):
        session.request.return_value = make_response(payload={})
        client = EstadoClient("http://registros", session=session, api_key="abc")

        client.get_estado(1)

        assert session.request.call_args.kwargs["headers"] == {"Authorization": "Bearer abc"}

    def test_service_secret_is_sent_by_default(self, session, monkeypatch):
        monkeypatch.setattr(settings, "service_auth_secret", "s2s")
        session.request.return_value = make_response(payload={})
        client = EstadoClient("http://registros", session=session)

        client.get_estado(1)

        assert session.request.call_args.kwargs["headers"] == {"Authorization": "Bearer s2s"}


class TestGeolocalizacionClient:
    def test_crear_direccion_posts_payload(self, session):
        session.request.return_value = make_response(payload={"id_direccion": 5})
        client = GeolocalizacionClient("http://geo", session=session)

        created = client.crear_direccion({"calle": "Alameda"})

        assert created["id_direccion"] == 5
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == {"calle": "Alameda"}

    def test_crear_direccion_without_id_raises(self, session):
        session.request.return_value = make_response(payload={"calle": "Alameda"})
        client = GeolocalizacionClient("http://geo", session=session)

        with pytest.raises(ExternalServiceError):
            client.crear_direccion({"calle": "Alameda"})


class TestFotoClient:
    def test_subir_foto_returns_id(self, session):
        session.request.return_value = make_response(payload={"id_foto": "12"})
        client = FotoClient("http://registros", session=session)

        id_foto = client.subir_foto("a.png", b"data", "image/png")

        assert id_foto == 12
        kwargs = session.request.call_args.kwargs
        assert kwargs["url"] == "http://registros/fotos/upload"
        assert kwargs["files"]["archivo"][0] == "a.png"
