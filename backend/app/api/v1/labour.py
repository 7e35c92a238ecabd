"""Labour roster API endpoints."""

from datetime import date, datetime

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_serializer

from app.api.v1.dependencies import LabourServiceDep
from app.api.v1.orders.schemas import StatusResponse
from app.models.enums import LabourCategory, LabourStatus
from app.models.labour import Labour
from app.services.labour.exceptions import LabourNotFound
from app.utils.datetime_utils import to_shop_timezone

router = APIRouter(tags=["labour"])


class LabourResponse(BaseModel):
    id: int
    name: str
    category: LabourCategory
    specialist: str
    age: int | None
    phone: str
    photo: str | None
    join_date: date
    status: LabourStatus
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, dt: datetime) -> str:
        """Serialize datetime to shop timezone."""
        localized_dt = to_shop_timezone(dt)
        assert localized_dt is not None
        return localized_dt.isoformat()

    @classmethod
    def from_model(cls, labour: Labour) -> "LabourResponse":
        return cls.model_validate(labour, from_attributes=True)


class LabourCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    category: LabourCategory
    specialist: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    age: int | None = Field(default=None, ge=0)
    photo: str | None = None
    join_date: date | None = None
    status: LabourStatus = LabourStatus.ACTIVE


class LabourUpdateRequest(BaseModel):
    """Partial update. ``age`` and ``photo`` may be cleared with null."""

    name: str | None = Field(default=None, min_length=1)
    category: LabourCategory | None = None
    specialist: str | None = Field(default=None, min_length=1)
    phone: str | None = Field(default=None, min_length=1)
    age: int | None = Field(default=None, ge=0)
    photo: str | None = None
    join_date: date | None = None
    status: LabourStatus | None = None


NULLABLE_LABOUR_FIELDS = frozenset({"age", "photo"})


@router.get("/labour", response_model=list[LabourResponse], operation_id="listLabour")
async def list_labour(service: LabourServiceDep) -> list[LabourResponse]:
    return [LabourResponse.from_model(w) for w in await service.list_labour()]


@router.get("/labour/category/{category}", response_model=list[LabourResponse], operation_id="listLabourByCategory")
async def list_labour_by_category(category: LabourCategory, service: LabourServiceDep) -> list[LabourResponse]:
    return [LabourResponse.from_model(w) for w in await service.list_labour(category=category)]


@router.get("/labour/{labour_id}", response_model=LabourResponse, operation_id="getLabour")
async def get_labour(labour_id: int, service: LabourServiceDep) -> LabourResponse:
    try:
        return LabourResponse.from_model(await service.get_labour(labour_id))
    except LabourNotFound:
        raise HTTPException(status_code=404, detail="Labour not found")


@router.post("/labour", response_model=LabourResponse, status_code=201, operation_id="createLabour")
async def create_labour(body: LabourCreateRequest, service: LabourServiceDep) -> LabourResponse:
    labour = await service.create_labour(**body.model_dump())
    return LabourResponse.from_model(labour)


@router.put("/labour/{labour_id}", response_model=LabourResponse, operation_id="updateLabour")
async def update_labour(labour_id: int, body: LabourUpdateRequest, service: LabourServiceDep) -> LabourResponse:
    changes = {
        k: v
        for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k in NULLABLE_LABOUR_FIELDS
    }
    try:
        return LabourResponse.from_model(await service.update_labour(labour_id, changes))
    except LabourNotFound:
        raise HTTPException(status_code=404, detail="Labour not found")


@router.delete("/labour/{labour_id}", response_model=StatusResponse, operation_id="deleteLabour")
async def delete_labour(labour_id: int, service: LabourServiceDep) -> StatusResponse:
    try:
        await service.delete_labour(labour_id)
    except LabourNotFound:
        raise HTTPException(status_code=404, detail="Labour not found")
    return StatusResponse(status="deleted", message="Labour deleted successfully")
