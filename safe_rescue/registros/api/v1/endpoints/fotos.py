"""
Photo endpoints.

``POST /fotos/upload`` takes a multipart form with an ``archivo`` file
field, stores the file and answers with the created foto; Perfiles and
Incidentes keep only the returned ``id_foto``.  The stored file is
served back by ``GET /fotos/{id}/archivo``.
"""

from typing import List

from fastapi import APIRouter, File, UploadFile, status
from fastapi.responses import FileResponse

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.registros.schemas.foto import FotoCreate, FotoRead, FotoUpdate, FotoUrl
from safe_rescue.registros.services.foto_service import FotoService

router = APIRouter()


@router.get("", response_model=List[FotoRead])
@handle_service_errors
def list_fotos():
    return list_or_no_content(FotoService.find_all())


@router.post("/upload", response_model=FotoRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def upload_foto(archivo: UploadFile = File(...)) -> FotoRead:
    content = archivo.file.read()
    return FotoService.upload(archivo.filename, content, archivo.content_type)


@router.get("/archivo/{filename}", response_class=FileResponse)
@handle_service_errors
def get_archivo_by_name(filename: str):
    return FileResponse(FotoService.get_file_by_name(filename))


@router.get("/{id_foto}", response_model=FotoRead)
@handle_service_errors
def get_foto(id_foto: int) -> FotoRead:
    return FotoService.find_by_id(id_foto)


@router.get("/{id_foto}/archivo", response_class=FileResponse)
@handle_service_errors
def get_archivo(id_foto: int):
    """Serve the stored image of a foto; 404 when the file is gone."""
    return FileResponse(FotoService.get_file_path(id_foto))


@router.get("/{id_foto}/url", response_model=FotoUrl)
@handle_service_errors
def get_foto_url(id_foto: int) -> FotoUrl:
    foto = FotoService.find_by_id(id_foto)
    return FotoUrl(id_foto=foto.id_foto, url=foto.url)


@router.post("", response_model=FotoRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_foto(foto_in: FotoCreate) -> FotoRead:
    """Register metadata for an image stored elsewhere."""
    return FotoService.save(foto_in)


@router.put("/{id_foto}", response_model=FotoRead)
@handle_service_errors
def update_foto(id_foto: int, foto_in: FotoUpdate) -> FotoRead:
    return FotoService.update(id_foto, foto_in)


@router.delete("/{id_foto}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_foto(id_foto: int) -> None:
    """Delete the foto row and its stored file."""
    FotoService.delete(id_foto)
