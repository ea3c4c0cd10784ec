"""Tests for the Incidentes service: types, incidents and their history."""

import pytest

from safe_rescue.core.exceptions import ConflictError, NotFoundError, ValidationError
from safe_rescue.incidentes.schemas.incidente import (
    IncidenteCreate,
    IncidenteUpdate,
    TipoIncidenteCreate,
    UbicacionIncidente,
)
from safe_rescue.incidentes.services.historial_incidente_service import HistorialIncidenteService
from safe_rescue.incidentes.services.incidente_service import IncidenteService
from safe_rescue.incidentes.services.tipo_incidente_service import TipoIncidenteService

BASE = "/api-incidentes/v1"


def incidente_data(**overrides):
    data = {
        "titulo": "Incendio en bodega",
        "detalle": "Humo visible desde la calle",
        "region": "Metropolitana",
        "comuna": "Maipú",
        "direccion": "Av. Pajaritos 1234",
        "id_tipo_incidente": 1,
        "id_ciudadano": 1,
        "id_estado_incidente": 4,
        "id_direccion": 1,
    }
    data.update(overrides)
    return data


@pytest.fixture
def incidente(incidentes_db):
    return IncidenteService.save(IncidenteCreate(**incidente_data()))


def detalles(id_incidente):
    return [h.detalle for h in reversed(HistorialIncidenteService.find_by_incidente(id_incidente))]


class TestTipoIncidente:
    def test_seeded(self, incidentes_db):
        nombres = [t.nombre for t in TipoIncidenteService.find_all()]

        assert nombres == [
            "Incendio Estructural",
            "Incendio Forestal",
            "Accidente Vehicular",
            "Rescate Animal",
            "Escape de Gas",
        ]

    def test_duplicate_nombre_is_rejected(self, incidentes_db):
        with pytest.raises(ValidationError):
            TipoIncidenteService.save(TipoIncidenteCreate(nombre="Rescate Animal"))

    def test_nombre_length_boundary(self, incidentes_db):
        TipoIncidenteService.save(TipoIncidenteCreate(nombre="a" * 50))

        with pytest.raises(ValidationError):
            TipoIncidenteService.save(TipoIncidenteCreate(nombre="b" * 51))

    def test_delete_in_use_raises_conflict(self, incidente):
        with pytest.raises(ConflictError):
            TipoIncidenteService.delete(1)


class TestIncidenteService:
    def test_save_sets_dates(self, incidente):
        assert incidente.fecha_registro
        assert incidente.fecha_ultima_actualizacion

    def test_save_none_raises(self, incidentes_db):
        with pytest.raises(ValidationError):
            IncidenteService.save(None)

    def test_find_missing_raises(self, incidentes_db):
        with pytest.raises(NotFoundError):
            IncidenteService.find_by_id(3)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("id_ciudadano", 99),
            ("id_estado_incidente", 99),
            ("id_usuario_asignado", 99),
            ("id_direccion", 99),
            ("id_tipo_incidente", 99),
        ],
    )
    def test_unknown_references_are_rejected(self, incidentes_db, field, value):
        with pytest.raises(ValidationError):
            IncidenteService.save(IncidenteCreate(**incidente_data(**{field: value})))

    def test_titulo_length_boundary(self, incidentes_db):
        IncidenteService.save(IncidenteCreate(**incidente_data(titulo="a" * 50)))

        with pytest.raises(ValidationError):
            IncidenteService.save(IncidenteCreate(**incidente_data(titulo="a" * 51)))

    def test_update_copies_only_present_fields(self, incidente):
        updated = IncidenteService.update(incidente.id_incidente, IncidenteUpdate(region="Valparaíso"))

        assert updated.region == "Valparaíso"
        assert updated.titulo == incidente.titulo
        assert updated.fecha_registro == incidente.fecha_registro

    def test_update_records_each_change(self, incidente):
        # Act
        IncidenteService.update(
            incidente.id_incidente,
            IncidenteUpdate(
                id_estado_incidente=5,
                id_usuario_asignado=2,
                titulo="Incendio controlado",
                detalle="Sin lesionados",
            ),
        )

        # Assert
        assert detalles(incidente.id_incidente) == [
            "Se cambió el estado a: Localizado",
            "Incidente asignado a: Bruno",
            "Se cambió el título a: Incendio controlado",
            "Se actualizó la descripción del incidente.",
        ]
        historial = HistorialIncidenteService.find_by_incidente(incidente.id_incidente)
        estado = [h for h in historial if h.detalle.startswith("Se cambió el estado")][0]
        assert (estado.id_estado_anterior, estado.id_estado_nuevo) == (4, 5)

    def test_unchanged_values_record_nothing(self, incidente):
        IncidenteService.update(incidente.id_incidente, IncidenteUpdate(titulo=incidente.titulo))

        assert HistorialIncidenteService.find_by_incidente(incidente.id_incidente) == []

    def test_partial_update_ignores_blank_values(self, incidente):
        updated = IncidenteService.partial_update(
            incidente.id_incidente, IncidenteUpdate(titulo="", detalle="Se extiende a la casa vecina")
        )

        assert updated.titulo == incidente.titulo
        assert detalles(incidente.id_incidente) == ["Se actualizó la descripción del incidente."]

    def test_asignar_estado_records_history(self, incidente):
        updated = IncidenteService.asignar_estado(incidente.id_incidente, 6)

        assert updated.id_estado_incidente == 6
        assert detalles(incidente.id_incidente) == ["Se cambió el estado a: Cerrado"]

    def test_asignar_unknown_usuario_raises_not_found(self, incidente):
        with pytest.raises(NotFoundError):
            IncidenteService.asignar_usuario(incidente.id_incidente, 99)

    def test_asignar_tipo(self, incidente):
        assert IncidenteService.asignar_tipo(incidente.id_incidente, 3).id_tipo_incidente == 3

        with pytest.raises(NotFoundError):
            IncidenteService.asignar_tipo(incidente.id_incidente, 30)

    def test_agregar_ubicacion_links_new_direccion(self, incidente, remote):
        ubicacion = UbicacionIncidente(calle="Pajaritos", numero="1234", id_comuna=1, latitud=-33.5, longitud=-70.7)

        updated = IncidenteService.agregar_ubicacion(incidente.id_incidente, ubicacion)

        assert updated.id_direccion == 2
        payload = remote.geolocalizacion.crear_direccion.call_args.args[0]
        assert payload["coordenadas"] == {"latitud": -33.5, "longitud": -70.7}

    def test_subir_foto(self, incidente, remote):
        updated = IncidenteService.subir_foto(incidente.id_incidente, "humo.jpg", b"jpeg", "image/jpeg")

        assert updated.id_foto == 42

    def test_delete_removes_history(self, incidente):
        IncidenteService.asignar_estado(incidente.id_incidente, 5)

        IncidenteService.delete(incidente.id_incidente)

        assert HistorialIncidenteService.find_all() == []


class TestIncidentesApi:
    def test_create_and_get(self, incidentes_api):
        created = incidentes_api.post(f"{BASE}/incidentes", json=incidente_data())

        assert created.status_code == 201
        fetched = incidentes_api.get(f"{BASE}/incidentes/{created.json()['id_incidente']}")
        assert fetched.json()["titulo"] == "Incendio en bodega"

    def test_unknown_ciudadano_returns_400(self, incidentes_api):
        response = incidentes_api.post(f"{BASE}/incidentes", json=incidente_data(id_ciudadano=77))

        assert response.status_code == 400
        assert response.json()["detail"] == "El ciudadano asociado no existe"

    def test_patch_and_history(self, incidentes_api):
        incidentes_api.post(f"{BASE}/incidentes", json=incidente_data())

        patched = incidentes_api.patch(f"{BASE}/incidentes/1", json={"id_usuario_asignado": 3})
        historial = incidentes_api.get(f"{BASE}/incidentes/1/historial")
        todos = incidentes_api.get(f"{BASE}/historial/incidentes")

        assert patched.json()["id_usuario_asignado"] == 3
        assert [h["detalle"] for h in historial.json()] == ["Incidente asignado a: Carla"]
        assert len(todos.json()) == 1

    def test_asignar_missing_estado_returns_404(self, incidentes_api):
        incidentes_api.post(f"{BASE}/incidentes", json=incidente_data())

        response = incidentes_api.post(f"{BASE}/incidentes/1/asignar-estado-incidente/99")

        assert response.status_code == 404

    def test_asignar_direccion(self, incidentes_api, remote):
        incidentes_api.post(f"{BASE}/incidentes", json=incidente_data())
        remote.data.direcciones[8] = {"id_direccion": 8}

        response = incidentes_api.post(f"{BASE}/incidentes/1/asignar-direccion/8")

        assert response.json()["id_direccion"] == 8

    def test_upload_foto(self, incidentes_api, remote):
        incidentes_api.post(f"{BASE}/incidentes", json=incidente_data())

        response = incidentes_api.post(
            f"{BASE}/incidentes/1/subir-foto", files={"archivo": ("humo.jpg", b"jpeg", "image/jpeg")}
        )

        assert response.json()["id_foto"] == 42
        remote.fotos.subir_foto.assert_called_once_with("humo.jpg", b"jpeg", "image/jpeg")

    def test_patch_foto_requires_id(self, incidentes_api):
        incidentes_api.post(f"{BASE}/incidentes", json=incidente_data())

        assert incidentes_api.patch(f"{BASE}/incidentes/1/foto", json={}).status_code == 400
        assert incidentes_api.patch(f"{BASE}/incidentes/1/foto", json={"id_foto": 7}).json()["id_foto"] == 7

    def test_empty_list_returns_204(self, incidentes_api):
        assert incidentes_api.get(f"{BASE}/incidentes").status_code == 204
