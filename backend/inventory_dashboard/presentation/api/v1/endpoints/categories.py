"""Categories CRUD endpoints."""

from fastapi import APIRouter, Depends, status

from inventory_dashboard.application.schemas import CategoryChoice, CategoryForm, RecordResponse
from inventory_dashboard.application.services import DashboardService
from inventory_dashboard.application.services import inventory_views
from inventory_dashboard.domain.entities import EntityKind
from inventory_dashboard.infrastructure.dependencies import get_dashboard_service
from inventory_dashboard.presentation.api.v1.endpoints import errors

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[RecordResponse])
async def list_categories(
    service: DashboardService = Depends(get_dashboard_service),
) -> list[RecordResponse]:
    return [RecordResponse.model_validate(r, from_attributes=True) for r in service.categories]


@router.get("/choices", response_model=list[CategoryChoice])
async def category_choices(
    service: DashboardService = Depends(get_dashboard_service),
) -> list[CategoryChoice]:
    """Filter choices: the 'all' sentinel, built-in keys, then stored categories."""
    choices = [CategoryChoice(key=key, label=label) for key, label in inventory_views.CATEGORY_CHOICES]
    choices.extend(
        CategoryChoice(key=record.record_id, label=record.text("name") or record.record_id)
        for record in service.categories
    )
    return choices


@router.get("/{record_id}", response_model=RecordResponse)
async def get_category(
    record_id: str,
    service: DashboardService = Depends(get_dashboard_service),
) -> RecordResponse:
    with errors.store_errors(errors.LOAD_FAILED):
        record = await service.fetch(EntityKind.CATEGORIES, record_id)
    return RecordResponse.model_validate(record, from_attributes=True)


@router.get("/{record_id}/form", response_model=CategoryForm)
async def edit_category_form(
    record_id: str,
    service: DashboardService = Depends(get_dashboard_service),
) -> CategoryForm:
    with errors.store_errors(errors.LOAD_FAILED):
        return CategoryForm.from_record(service.find(EntityKind.CATEGORIES, record_id))


@router.post("", response_model=CategoryForm, status_code=status.HTTP_201_CREATED)
async def create_category(
    form: CategoryForm,
    service: DashboardService = Depends(get_dashboard_service),
) -> CategoryForm:
    with errors.store_errors(errors.CREATE_CATEGORY_FAILED):
        return await service.create_category(form)


@router.patch("/{record_id}", response_model=CategoryForm)
async def update_category(
    record_id: str,
    form: CategoryForm,
    service: DashboardService = Depends(get_dashboard_service),
) -> CategoryForm:
    """Partial update: only the submitted fields are sent to the store."""
    with errors.store_errors(errors.UPDATE_CATEGORY_FAILED):
        return await service.update_category(record_id, form)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    record_id: str,
    service: DashboardService = Depends(get_dashboard_service),
) -> None:
    """Delete without checking for items that still reference it."""
    with errors.store_errors(errors.DELETE_CATEGORY_FAILED):
        await service.delete_category(record_id)
