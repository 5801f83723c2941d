"""Locations CRUD endpoints."""

from fastapi import APIRouter, Depends, status

from inventory_dashboard.application.schemas import LocationForm, RecordResponse
from inventory_dashboard.application.services import DashboardService
from inventory_dashboard.domain.entities import EntityKind
from inventory_dashboard.infrastructure.dependencies import get_dashboard_service
from inventory_dashboard.presentation.api.v1.endpoints import errors

router = APIRouter(prefix="/locations", tags=["Locations"])


@router.get("", response_model=list[RecordResponse])
async def list_locations(
    service: DashboardService = Depends(get_dashboard_service),
) -> list[RecordResponse]:
    return [RecordResponse.model_validate(r, from_attributes=True) for r in service.locations]


@router.get("/{record_id}", response_model=RecordResponse)
async def get_location(
    record_id: str,
    service: DashboardService = Depends(get_dashboard_service),
) -> RecordResponse:
    with errors.store_errors(errors.LOAD_FAILED):
        record = await service.fetch(EntityKind.LOCATIONS, record_id)
    return RecordResponse.model_validate(record, from_attributes=True)


@router.get("/{record_id}/form", response_model=LocationForm)
async def edit_location_form(
    record_id: str,
    service: DashboardService = Depends(get_dashboard_service),
) -> LocationForm:
    with errors.store_errors(errors.LOAD_FAILED):
        return LocationForm.from_record(service.find(EntityKind.LOCATIONS, record_id))


@router.post("", response_model=LocationForm, status_code=status.HTTP_201_CREATED)
async def create_location(
    form: LocationForm,
    service: DashboardService = Depends(get_dashboard_service),
) -> LocationForm:
    with errors.store_errors(errors.CREATE_LOCATION_FAILED):
        return await service.create_location(form)


@router.patch("/{record_id}", response_model=LocationForm)
async def update_location(
    record_id: str,
    form: LocationForm,
    service: DashboardService = Depends(get_dashboard_service),
) -> LocationForm:
    """Partial update: only the submitted fields are sent to the store."""
    with errors.store_errors(errors.UPDATE_LOCATION_FAILED):
        return await service.update_location(record_id, form)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(
    record_id: str,
    service: DashboardService = Depends(get_dashboard_service),
) -> None:
    """Delete without checking for items that still reference it."""
    with errors.store_errors(errors.DELETE_LOCATION_FAILED):
        await service.delete_location(record_id)
