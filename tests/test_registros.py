"""Tests for the Registros service: catalogues, historial and photos."""

from pathlib import Path

import pytest

from safe_rescue.core.config import settings
from safe_rescue.core.exceptions import ConflictError, NotFoundError, ValidationError
from safe_rescue.registros.schemas.catalogo import CategoriaCreate, CategoriaUpdate
from safe_rescue.registros.schemas.historial import HistorialCreate
from safe_rescue.registros.services.catalogo_service import CategoriaService, EstadoService
from safe_rescue.registros.services.foto_service import FotoService, build_filename
from safe_rescue.registros.services.historial_service import HistorialService

BASE = "/api-registros/v1"


class TestCatalogo:
    def test_estados_are_seeded(self, registros_db):
        nombres = [estado.nombre for estado in EstadoService.find_all()]

        assert nombres[:3] == ["Activo", "Baneado", "Inactivo"]
        assert nombres[-1] == "Visto"
        assert len(nombres) == 9

    def test_find_by_nombre(self, registros_db):
        assert EstadoService.find_by_nombre("Enviado").id_estado == 7

        with pytest.raises(NotFoundError):
            EstadoService.find_by_nombre("Perdido")

    def test_save_none_raises(self, registros_db):
        with pytest.raises(ValidationError):
            CategoriaService.save(None)

    def test_nombre_length_boundary(self, registros_db):
        CategoriaService.save(CategoriaCreate(nombre="a" * 50))

        with pytest.raises(ValidationError):
            CategoriaService.save(CategoriaCreate(nombre="b" * 51))

    def test_update_copies_only_present_fields(self, registros_db):
        categoria = CategoriaService.save(CategoriaCreate(nombre="Usuarios", descripcion="Cuentas"))

        updated = CategoriaService.update(categoria.id_categoria, CategoriaUpdate(descripcion="Perfiles"))

        assert updated.nombre == "Usuarios"
        assert updated.descripcion == "Perfiles"

    def test_delete_estado_in_use_raises_conflict(self, registros_db):
        categoria = CategoriaService.save(CategoriaCreate(nombre="Usuarios"))
        HistorialService.save(HistorialCreate(id_estado=1, id_categoria=categoria.id_categoria, detalle="Alta"))

        with pytest.raises(ConflictError):
            EstadoService.delete(1)


class TestHistorial:
    def test_fecha_is_set_when_absent(self, registros_db):
        categoria = CategoriaService.save(CategoriaCreate(nombre="Usuarios"))

        historial = HistorialService.save(
            HistorialCreate(id_estado=1, id_categoria=categoria.id_categoria, detalle="Alta")
        )

        assert historial.fecha_historial

    def test_blank_detalle_is_rejected(self, registros_db):
        categoria = CategoriaService.save(CategoriaCreate(nombre="Usuarios"))

        with pytest.raises(ValidationError):
            HistorialService.save(HistorialCreate(id_estado=1, id_categoria=categoria.id_categoria, detalle="  "))

    def test_unknown_estado_is_rejected(self, registros_db):
        categoria = CategoriaService.save(CategoriaCreate(nombre="Usuarios"))

        with pytest.raises(ValidationError):
            HistorialService.save(HistorialCreate(id_estado=99, id_categoria=categoria.id_categoria, detalle="x"))

    def test_list_by_estado_newest_first(self, registros_api):
        categoria = registros_api.post(f"{BASE}/categorias", json={"nombre": "Usuarios"}).json()
        for detalle in ("primero", "segundo"):
            registros_api.post(
                f"{BASE}/historial",
                json={"id_estado": 2, "id_categoria": categoria["id_categoria"], "detalle": detalle},
            )

        response = registros_api.get(f"{BASE}/historial/estado/2")

        assert [h["detalle"] for h in response.json()] == ["segundo", "primero"]

    def test_list_by_estado_without_rows_returns_204(self, registros_api):
        assert registros_api.get(f"{BASE}/historial/estado/3").status_code == 204


class TestCatalogoApi:
    def test_buscar_estado(self, registros_api):
        response = registros_api.get(f"{BASE}/estados/buscar", params={"nombre": "Cerrado"})

        assert response.status_code == 200
        assert response.json()["id_estado"] == 6

    def test_duplicate_categoria_returns_400(self, registros_api):
        registros_api.post(f"{BASE}/categorias", json={"nombre": "Usuarios"})

        response = registros_api.post(f"{BASE}/categorias", json={"nombre": "Usuarios"})

        assert response.status_code == 400

    def test_empty_categorias_returns_204(self, registros_api):
        assert registros_api.get(f"{BASE}/categorias").status_code == 204


class TestFotos:
    def test_build_filename_keeps_extension(self):
        assert build_filename("retrato.PNG").endswith(".png")
        assert build_filename(None).endswith(".jpg")

    def test_upload_stores_file(self, registros_api):
        # Act
        response = registros_api.post(
            f"{BASE}/fotos/upload",
            files={"archivo": ("incendio.png", b"\x89PNG-data", "image/png")},
        )

        # Assert
        assert response.status_code == 201
        foto = response.json()
        assert foto["tamanio"] == len(b"\x89PNG-data")
        assert foto["tipo"] == "image/png"
        stored = Path(settings.upload_dir) / Path(foto["url"]).name
        assert stored.read_bytes() == b"\x89PNG-data"

        archivo = registros_api.get(f"{BASE}/fotos/{foto['id_foto']}/archivo")
        assert archivo.content == b"\x89PNG-data"

        url = registros_api.get(f"{BASE}/fotos/{foto['id_foto']}/url").json()
        assert url == {"id_foto": foto["id_foto"], "url": foto["url"]}

    def test_empty_upload_is_rejected(self, registros_api):
        response = registros_api.post(f"{BASE}/fotos/upload", files={"archivo": ("vacia.png", b"", "image/png")})

        assert response.status_code == 400

    def test_delete_removes_file(self, registros_db):
        foto = FotoService.upload("a.jpg", b"data", "image/jpeg")
        stored = Path(settings.upload_dir) / Path(foto.url).name

        FotoService.delete(foto.id_foto)

        assert not stored.exists()
        with pytest.raises(NotFoundError):
            FotoService.find_by_id(foto.id_foto)

    def test_file_name_with_path_is_rejected(self, registros_db):
        with pytest.raises(ValidationError):
            FotoService.get_file_by_name("../secreto.txt")

    def test_negative_size_is_rejected(self, registros_api):
        response = registros_api.post(f"{BASE}/fotos", json={"url": "http://cdn/x.jpg", "tamanio": -1})

        assert response.status_code == 400
