"""
Photo metadata and file storage.

Uploaded files are written to ``settings.upload_dir`` under a name
made of the upload timestamp and a short random suffix, e.g.
``20250301_143005_a1b2c3d4.jpg``; the ``url`` column stores that path.
Deleting a foto removes the stored file as well.
"""

import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel

from safe_rescue.core import db as core_db
from safe_rescue.core.config import settings
from safe_rescue.core.crud import CrudService
from safe_rescue.core.exceptions import NotFoundError, ValidationError
from safe_rescue.core.repository import Repository
from safe_rescue.core.timestamps import now_iso
from safe_rescue.core.validation import check_length, require
from safe_rescue.registros.db import get_connection
from safe_rescue.registros.schemas.foto import FotoRead

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "jpg"


def get_upload_dir() -> Path:
    """Directory holding uploaded files, created on first use."""
    upload_dir = Path(core_db.resolve_project_path(settings.upload_dir))
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def build_filename(original_name: Optional[str]) -> str:
    """Return a unique stored name keeping the extension of ``original_name``."""
    suffix = Path(original_name or "").suffix.lstrip(".").lower()
    extension = suffix or DEFAULT_EXTENSION
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{stamp}_{uuid.uuid4().hex[:8]}.{extension}"


class FotoService(CrudService):
    label = "La foto"
    read_schema = FotoRead
    repository = Repository(
        "fotos",
        "id_foto",
        ("url", "fecha_subida", "descripcion", "tipo", "tamanio"),
        get_connection,
        "Foto",
    )

    @classmethod
    def prepare_create(cls, data: BaseModel) -> Dict[str, Any]:
        values = data.model_dump(mode="json")
        values["fecha_subida"] = values.get("fecha_subida") or now_iso()
        return values

    @classmethod
    def validate(cls, values: Dict[str, Any], entity_id: Optional[int] = None) -> None:
        require(values.get("url"), "url")
        check_length(values.get("descripcion"), "descripcion", 255)
        check_length(values.get("tipo"), "tipo", 50)
        tamanio = values.get("tamanio")
        if tamanio is not None and tamanio < 0:
            raise ValidationError("El tamaño no puede ser negativo", field="tamanio")

    @classmethod
    def upload(cls, original_name: Optional[str], content: bytes, content_type: Optional[str]) -> FotoRead:
        """Store ``content`` on disk and create its foto row."""
        if not content:
            raise ValidationError("El archivo está vacío", field="archivo")
        filename = build_filename(original_name)
        path = get_upload_dir() / filename
        path.write_bytes(content)
        logger.info("Stored upload %s (%s bytes)", filename, len(content))
        values = {
            "url": str(Path(settings.upload_dir) / filename),
            "fecha_subida": now_iso(),
            "tipo": content_type,
            "tamanio": len(content),
        }
        try:
            new_id = cls.repository.insert(values)
        except ValidationError:
            path.unlink(missing_ok=True)
            raise
        return cls.find_by_id(new_id)

    @classmethod
    def get_file_path(cls, id_foto: int) -> Path:
        """Path of the stored file of a foto; 404 when it is not on disk."""
        foto = cls.repository.get(id_foto)
        path = cls._local_path(foto["url"])
        if path is None or not path.is_file():
            raise NotFoundError("Archivo de la foto", id_foto)
        return path

    @classmethod
    def get_file_by_name(cls, filename: str) -> Path:
        if not filename or Path(filename).name != filename:
            raise ValidationError("Nombre de archivo inválido", field="filename")
        path = get_upload_dir() / filename
        if not path.is_file():
            raise NotFoundError("Archivo", filename)
        return path

    @classmethod
    def delete(cls, entity_id: int) -> None:
        foto = cls.repository.get(entity_id)
        cls.repository.delete(entity_id)
        path = cls._local_path(foto["url"])
        if path is not None and path.is_file():
            path.unlink()
            logger.info("Removed stored file %s", path.name)

    @staticmethod
    def _local_path(url: str) -> Optional[Path]:
        """Stored file behind ``url``, or ``None`` when it points elsewhere."""
        if Path(url).parent != Path(settings.upload_dir):
            return None
        return get_upload_dir() / Path(url).name
