"""Region endpoints."""

from typing import List

from fastapi import APIRouter, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.responses import list_or_no_content
from safe_rescue.geolocalizacion.schemas.territorio import RegionCreate, RegionRead, RegionUpdate
from safe_rescue.geolocalizacion.services.territorio_service import RegionService

router = APIRouter()


@router.get("", response_model=List[RegionRead])
@handle_service_errors
def list_regiones():
    return list_or_no_content(RegionService.find_all())


@router.get("/{id_region}", response_model=RegionRead)
@handle_service_errors
def get_region(id_region: int) -> RegionRead:
    return RegionService.find_by_id(id_region)


@router.post("", response_model=RegionRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def create_region(region_in: RegionCreate) -> RegionRead:
    """Create a region under an existing country.

    The ``identificacion`` must be unique; a duplicate is reported as 400.
    """
    return RegionService.save(region_in)


@router.put("/{id_region}", response_model=RegionRead)
@handle_service_errors
def update_region(id_region: int, region_in: RegionUpdate) -> RegionRead:
    return RegionService.update(id_region, region_in)


@router.delete("/{id_region}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
def delete_region(id_region: int) -> None:
    """Delete a region; 409 while comunas still belong to it."""
    RegionService.delete(id_region)
