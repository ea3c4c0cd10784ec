"""Read-only history of every incident."""

from typing import List

from fastapi import APIRouter

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.incidentes.schemas.incidente import HistorialIncidenteRead
from safe_rescue.incidentes.services.historial_incidente_service import HistorialIncidenteService

router = APIRouter()


@router.get("/incidentes", response_model=List[HistorialIncidenteRead])
@handle_service_errors
def list_historial_incidentes():
    """Return every history row, newest first."""
    return list_or_no_content(HistorialIncidenteService.find_all())
