"""CRUD endpoints for estimation records."""

from fastapi import APIRouter

from estimation_hub.models.estimation import (
    EstimationCreate,
    EstimationFilter,
    EstimationRecord,
    EstimationUpdate,
)
from estimation_hub.store import service

router = APIRouter(prefix="/api/estimations", tags=["estimations"])


@router.get("", response_model=list[EstimationRecord])
async def list_estimations(
    search: str | None = None,
    filter: EstimationFilter = EstimationFilter.ALL,
) -> list[EstimationRecord]:
    """List estimations, newest first, with optional search and filter."""
    return await service.list_estimations(search=search, filter=filter)


@router.post("", response_model=EstimationRecord, status_code=201)
async def create_estimation(body: EstimationCreate) -> EstimationRecord:
    return await service.create_estimation(body)


@router.get("/{record_id}", response_model=EstimationRecord)
async def get_estimation(record_id: str) -> EstimationRecord:
    return await service.get_estimation(record_id)


@router.patch("/{record_id}", response_model=EstimationRecord)
async def update_estimation(record_id: str, body: EstimationUpdate) -> EstimationRecord:
    """Merge only the fields present in the body."""
    return await service.update_estimation(record_id, body)


@router.delete("/{record_id}")
async def delete_estimation(record_id: str) -> dict:
    await service.delete_estimation(record_id)
    return {"success": True}
