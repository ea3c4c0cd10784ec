"""Tests for the Perfiles service: users, subtypes, teams, audit trail and auth."""

import pytest

from safe_rescue.core.config import settings
from safe_rescue.core.exceptions import ConflictError, NotFoundError, ValidationError
from safe_rescue.core.security import decode_access_token, verify_password
from safe_rescue.perfiles.db import get_connection
from safe_rescue.perfiles.schemas.organizacion import CompaniaCreate, CompaniaUpdate, EquipoCreate, EquipoUpdate
from safe_rescue.perfiles.schemas.usuario import BomberoCreate, UsuarioCreate, UsuarioUpdate
from safe_rescue.perfiles.services.historial_service import HistorialUsuarioService
from safe_rescue.perfiles.services.organizacion_service import CompaniaService, EquipoService, TipoUsuarioService
from safe_rescue.perfiles.services.usuario_service import BomberoService, UsuarioService

BASE = "/api-perfiles/v1"


def usuario_data(**overrides):
    data = {
        "run": "12345678",
        "dv": "5",
        "nombre": "Ana",
        "a_paterno": "Pérez",
        "a_materno": "Soto",
        "telefono": "912345678",
        "correo": "ana@example.cl",
        "nombre_usuario": "anaperez",
        "contrasenia": "secreto123",
        "id_estado": 1,
        "id_tipo_usuario": 3,
    }
    data.update(overrides)
    return data


def registro_data(**overrides):
    data = {
        "nombre_usuario": "carlos01",
        "run": "11222333",
        "dv": "K",
        "nombre": "Carlos",
        "a_paterno": "Rojas",
        "a_materno": "Díaz",
        "telefono": "987654321",
        "correo": "carlos@example.cl",
        "contrasenia": "clave1234",
        "direccion": {"calle": "Los Aromos", "numero": "123", "id_comuna": 1},
    }
    data.update(overrides)
    return data


@pytest.fixture
def equipo(perfiles_db):
    compania = CompaniaService.save(CompaniaCreate(nombre="Primera Compañía", id_direccion=1))
    return EquipoService.save(
        EquipoCreate(nombre="Rescate 1", id_compania=compania.id_compania, id_tipo_equipo=4, id_estado=1)
    )


class TestUsuarioService:
    def test_password_is_hashed(self, perfiles_db):
        usuario = UsuarioService.save(UsuarioCreate(**usuario_data()))

        row = UsuarioService.repository.get(usuario.id_usuario)
        assert row["contrasenia"] != "secreto123"
        assert verify_password("secreto123", row["contrasenia"])
        assert usuario.intentos_fallidos == 0
        assert usuario.fecha_registro

    def test_save_none_raises(self, perfiles_db):
        with pytest.raises(ValidationError):
            UsuarioService.save(None)

    def test_find_missing_raises(self, perfiles_db):
        with pytest.raises(NotFoundError):
            UsuarioService.find_by_id(10)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("run", "123456"),
            ("run", "123456789"),
            ("dv", "12"),
            ("correo", "sin-arroba"),
            ("telefono", "1234567890"),
            ("nombre_usuario", "a" * 21),
        ],
    )
    def test_invalid_fields_are_rejected(self, perfiles_db, field, value):
        with pytest.raises(ValidationError):
            UsuarioService.save(UsuarioCreate(**usuario_data(**{field: value})))

    def test_nombre_length_boundary(self, perfiles_db):
        UsuarioService.save(UsuarioCreate(**usuario_data(nombre="a" * 50)))

        with pytest.raises(ValidationError):
            UsuarioService.save(
                UsuarioCreate(**usuario_data(nombre="b" * 51, run="87654321", correo="b@x.cl", telefono="1", nombre_usuario="b"))
            )

    def test_unknown_estado_is_rejected(self, perfiles_db, remote):
        with pytest.raises(ValidationError):
            UsuarioService.save(UsuarioCreate(**usuario_data(id_estado=50)))

    def test_duplicate_run_is_an_integrity_error(self, perfiles_db):
        UsuarioService.save(UsuarioCreate(**usuario_data()))

        with pytest.raises(ValidationError) as exc_info:
            UsuarioService.save(UsuarioCreate(**usuario_data(correo="otra@x.cl", telefono="1", nombre_usuario="otra")))

        assert "RUN" in exc_info.value.message

    def test_update_copies_only_present_fields(self, perfiles_db):
        usuario = UsuarioService.save(UsuarioCreate(**usuario_data()))

        updated = UsuarioService.update(usuario.id_usuario, UsuarioUpdate(telefono="900000000"))

        assert updated.telefono == "900000000"
        assert updated.correo == "ana@example.cl"
        row = UsuarioService.repository.get(usuario.id_usuario)
        assert verify_password("secreto123", row["contrasenia"])

    def test_estado_change_is_recorded(self, perfiles_db):
        usuario = UsuarioService.save(UsuarioCreate(**usuario_data()))

        UsuarioService.update(usuario.id_usuario, UsuarioUpdate(id_estado=2))

        historial = HistorialUsuarioService.find_by_usuario(usuario.id_usuario)
        assert len(historial) == 1
        assert (historial[0].id_estado_anterior, historial[0].id_estado_nuevo) == (1, 2)

    def test_partial_update_rejects_taken_correo(self, perfiles_db):
        UsuarioService.save(UsuarioCreate(**usuario_data()))
        otro = UsuarioService.save(
            UsuarioCreate(**usuario_data(run="7654321", correo="b@x.cl", telefono="2", nombre_usuario="bruno"))
        )

        with pytest.raises(ConflictError):
            UsuarioService.partial_update(otro.id_usuario, UsuarioUpdate(correo="ana@example.cl"))

    def test_partial_update_of_missing_usuario_raises_not_found(self, perfiles_db):
        UsuarioService.save(UsuarioCreate(**usuario_data()))

        with pytest.raises(NotFoundError):
            UsuarioService.partial_update(99, UsuarioUpdate(correo="ana@example.cl"))

    def test_unchanged_estado_is_not_looked_up_again(self, perfiles_db, remote):
        usuario = UsuarioService.save(UsuarioCreate(**usuario_data()))
        remote.estados.get_estado.reset_mock()

        UsuarioService.update(usuario.id_usuario, UsuarioUpdate(nombre="Ana María"))
        remote.estados.get_estado.assert_not_called()

        UsuarioService.update(usuario.id_usuario, UsuarioUpdate(id_estado=2))
        remote.estados.get_estado.assert_called_once_with(2)

    def test_partial_update_ignores_blank_values(self, perfiles_db):
        usuario = UsuarioService.save(UsuarioCreate(**usuario_data()))

        updated = UsuarioService.partial_update(usuario.id_usuario, UsuarioUpdate(nombre="", a_paterno="Gómez"))

        assert updated.nombre == "Ana"
        assert updated.a_paterno == "Gómez"

    def test_delete_with_historial_raises_conflict(self, perfiles_db):
        usuario = UsuarioService.save(UsuarioCreate(**usuario_data()))
        UsuarioService.update(usuario.id_usuario, UsuarioUpdate(id_estado=3))

        with pytest.raises(ConflictError):
            UsuarioService.delete(usuario.id_usuario)

    def test_delete_tipo_usuario_in_use_raises_conflict(self, perfiles_db):
        UsuarioService.save(UsuarioCreate(**usuario_data()))

        with pytest.raises(ConflictError):
            TipoUsuarioService.delete(3)

    def test_subir_foto_links_remote_id(self, perfiles_db, remote):
        usuario = UsuarioService.save(UsuarioCreate(**usuario_data()))

        updated = UsuarioService.subir_foto(usuario.id_usuario, "yo.png", b"img", "image/png")

        assert updated.id_foto == 42
        remote.fotos.subir_foto.assert_called_once_with("yo.png", b"img", "image/png")


class TestBomberosYEquipos:
    def test_bombero_is_stored_in_both_tables(self, equipo):
        bombero = BomberoService.save(BomberoCreate(**usuario_data(), id_equipo=equipo.id_equipo))

        assert bombero.id_equipo == equipo.id_equipo
        assert BomberoService.is_bombero(bombero.id_usuario)
        assert UsuarioService.find_by_id(bombero.id_usuario).nombre == "Ana"

    def test_bombero_with_unknown_equipo_writes_nothing(self, equipo):
        with pytest.raises(ValidationError):
            BomberoService.save(BomberoCreate(**usuario_data(), id_equipo=99))

        assert UsuarioService.find_all() == []

    def test_lider_must_be_bombero(self, equipo):
        usuario = UsuarioService.save(UsuarioCreate(**usuario_data()))

        with pytest.raises(ValidationError):
            EquipoService.update(equipo.id_equipo, EquipoUpdate(id_lider=usuario.id_usuario))

    def test_equipo_estado_change_is_recorded(self, equipo):
        EquipoService.update(equipo.id_equipo, EquipoUpdate(id_estado=3))

        historial = HistorialUsuarioService.find_by_equipo(equipo.id_equipo)
        assert [h.id_estado_nuevo for h in historial] == [3]
        assert historial[0].id_usuario is None

    def test_rename_does_not_refetch_remote_references(self, equipo, remote):
        remote.estados.get_estado.reset_mock()
        remote.geolocalizacion.get_direccion.reset_mock()

        EquipoService.update(equipo.id_equipo, EquipoUpdate(nombre="Rescate 2"))
        CompaniaService.update(equipo.id_compania, CompaniaUpdate(nombre="Compañía Renombrada"))

        remote.estados.get_estado.assert_not_called()
        remote.geolocalizacion.get_direccion.assert_not_called()

    def test_compania_with_unknown_direccion_is_rejected(self, perfiles_db):
        with pytest.raises(ValidationError):
            CompaniaService.save(CompaniaCreate(nombre="Segunda", id_direccion=404))

    def test_delete_compania_with_equipos_raises_conflict(self, equipo):
        with pytest.raises(ConflictError):
            CompaniaService.delete(equipo.id_compania)

    def test_deleting_bombero_removes_subtype_row(self, equipo):
        bombero = BomberoService.save(BomberoCreate(**usuario_data(), id_equipo=equipo.id_equipo))

        BomberoService.delete(bombero.id_usuario)

        conn = get_connection()
        try:
            assert conn.execute("SELECT COUNT(*) FROM bomberos").fetchone()[0] == 0
        finally:
            conn.close()


class TestPerfilesApi:
    def test_tipos_usuario_are_seeded(self, perfiles_api):
        response = perfiles_api.get(f"{BASE}/tipos-usuario")

        assert response.status_code == 200
        assert [t["nombre"] for t in response.json()][-1] == "Ciudadano"

    def test_usuario_read_hides_password(self, perfiles_api):
        response = perfiles_api.post(f"{BASE}/usuarios", json=usuario_data())

        assert response.status_code == 201
        assert "contrasenia" not in response.json()

    def test_patch_usuario_conflict_returns_409(self, perfiles_api):
        perfiles_api.post(f"{BASE}/usuarios", json=usuario_data())
        otro = perfiles_api.post(
            f"{BASE}/usuarios",
            json=usuario_data(run="7654321", correo="b@x.cl", telefono="2", nombre_usuario="bruno"),
        ).json()

        response = perfiles_api.patch(f"{BASE}/usuarios/{otro['id_usuario']}", json={"nombre_usuario": "anaperez"})

        assert response.status_code == 409

    def test_historial_of_missing_usuario_returns_404(self, perfiles_api):
        assert perfiles_api.get(f"{BASE}/historial/usuario/9").status_code == 404

    def test_empty_ciudadanos_returns_204(self, perfiles_api):
        assert perfiles_api.get(f"{BASE}/ciudadanos").status_code == 204


class TestAuth:
    def test_register_creates_direccion_and_ciudadano(self, perfiles_api, remote):
        # Act
        response = perfiles_api.post(f"{BASE}/auth/register-ciudadano", json=registro_data())

        # Assert
        assert response.status_code == 201
        ciudadano = response.json()
        assert ciudadano["id_tipo_usuario"] == 5
        assert ciudadano["id_estado"] == 1
        payload = remote.geolocalizacion.crear_direccion.call_args.args[0]
        assert payload["coordenadas"] == {"latitud": -33.45694, "longitud": -70.64827}
        assert ciudadano["id_direccion"] == 2

    def test_register_duplicate_correo_returns_409(self, perfiles_api):
        perfiles_api.post(f"{BASE}/auth/register-ciudadano", json=registro_data())

        response = perfiles_api.post(
            f"{BASE}/auth/register-ciudadano",
            json=registro_data(run="99888777", nombre_usuario="otro01", telefono="1"),
        )

        assert response.status_code == 409

    def test_register_duplicate_telefono_returns_409(self, perfiles_api, remote):
        perfiles_api.post(f"{BASE}/auth/register-ciudadano", json=registro_data())
        remote.geolocalizacion.crear_direccion.reset_mock()

        response = perfiles_api.post(
            f"{BASE}/auth/register-ciudadano",
            json=registro_data(run="99888777", nombre_usuario="otro01", correo="otro@example.cl"),
        )

        assert response.status_code == 409
        assert "teléfono" in response.json()["detail"]
        remote.geolocalizacion.crear_direccion.assert_not_called()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"nombre_usuario": "abc"},
            {"nombre_usuario": "con espacio"},
            {"direccion": None},
            {"direccion": {"calle": "Los Aromos", "numero": "12B", "id_comuna": 1}},
        ],
    )
    def test_register_invalid_request_returns_400(self, perfiles_api, remote, overrides):
        response = perfiles_api.post(f"{BASE}/auth/register-ciudadano", json=registro_data(**overrides))

        assert response.status_code == 400
        remote.geolocalizacion.crear_direccion.assert_not_called()

    def test_login_issues_token(self, perfiles_api):
        perfiles_api.post(f"{BASE}/auth/register-ciudadano", json=registro_data())

        response = perfiles_api.post(
            f"{BASE}/auth/login", json={"correo": "carlos@example.cl", "contrasenia": "clave1234"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["tipo_perfil"] == "CIUDADANO"
        assert body["token_type"] == "bearer"
        claims = decode_access_token(body["access_token"])
        assert claims["sub"] == str(body["usuario"]["id_usuario"])

        me = perfiles_api.get(f"{BASE}/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
        assert me.json()["tipo_perfil"] == "CIUDADANO"

    def test_wrong_password_counts_attempts(self, perfiles_api):
        ciudadano = perfiles_api.post(f"{BASE}/auth/register-ciudadano", json=registro_data()).json()

        response = perfiles_api.post(f"{BASE}/auth/login", json={"correo": "carlos@example.cl", "contrasenia": "mala"})

        assert response.status_code == 401
        assert UsuarioService.find_by_id(ciudadano["id_usuario"]).intentos_fallidos == 1

    def test_unknown_correo_returns_404(self, perfiles_api):
        response = perfiles_api.post(f"{BASE}/auth/login", json={"correo": "nadie@x.cl", "contrasenia": "x"})

        assert response.status_code == 404

    def test_me_without_token_returns_401(self, perfiles_anon_api):
        assert perfiles_anon_api.get(f"{BASE}/auth/me").status_code == 401


class TestAccessControl:
    def _login_ciudadano(self, client):
        client.post(f"{BASE}/auth/register-ciudadano", json=registro_data())
        body = client.post(
            f"{BASE}/auth/login", json={"correo": "carlos@example.cl", "contrasenia": "clave1234"}
        ).json()
        return body["usuario"]["id_usuario"], {"Authorization": f"Bearer {body['access_token']}"}

    def test_routes_require_a_token(self, perfiles_anon_api):
        assert perfiles_anon_api.get(f"{BASE}/usuarios/1").status_code == 401
        assert perfiles_anon_api.get(f"{BASE}/tipos-usuario").status_code == 401
        invalid = {"Authorization": "Bearer basura"}
        assert perfiles_anon_api.get(f"{BASE}/usuarios/1", headers=invalid).status_code == 401

    def test_health_and_auth_stay_open(self, perfiles_anon_api):
        assert perfiles_anon_api.get("/health").status_code == 200
        response = perfiles_anon_api.post(f"{BASE}/auth/register-ciudadano", json=registro_data())
        assert response.status_code == 201

    def test_user_token_is_accepted(self, perfiles_anon_api):
        id_usuario, headers = self._login_ciudadano(perfiles_anon_api)

        response = perfiles_anon_api.get(f"{BASE}/usuarios/{id_usuario}", headers=headers)

        assert response.status_code == 200
        assert response.json()["correo"] == "carlos@example.cl"

    def test_service_secret_is_accepted(self, perfiles_anon_api):
        id_usuario, _ = self._login_ciudadano(perfiles_anon_api)
        headers = {"Authorization": f"Bearer {settings.service_auth_secret}"}

        response = perfiles_anon_api.get(f"{BASE}/usuarios/{id_usuario}", headers=headers)

        assert response.status_code == 200

    def test_listing_usuarios_requires_administrator(self, perfiles_anon_api):
        _, headers = self._login_ciudadano(perfiles_anon_api)
        service = {"Authorization": f"Bearer {settings.service_auth_secret}"}

        assert perfiles_anon_api.get(f"{BASE}/usuarios", headers=headers).status_code == 403
        assert perfiles_anon_api.get(f"{BASE}/usuarios", headers=service).status_code == 403

    def test_administrator_lists_usuarios(self, perfiles_api):
        perfiles_api.post(f"{BASE}/usuarios", json=usuario_data())

        response = perfiles_api.get(f"{BASE}/usuarios")

        assert response.status_code == 200
        assert [u["nombre_usuario"] for u in response.json()] == ["anaperez"]

    def test_me_with_service_secret_returns_service_claims(self, perfiles_anon_api):
        headers = {"Authorization": f"Bearer {settings.service_auth_secret}"}

        response = perfiles_anon_api.get(f"{BASE}/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["tipo_perfil"] == "SERVICE"
