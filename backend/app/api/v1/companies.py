"""Company API endpoints."""

from datetime import datetime

import structlog
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_serializer

from app.api.v1.dependencies import CompanyServiceDep
from app.api.v1.orders.schemas import OrderResponse, StatusResponse
from app.models.company import Company
from app.models.enums import CompanyStatus
from app.services.companies.exceptions import CompanyAlreadyExists, CompanyNotFound
from app.utils.datetime_utils import to_shop_timezone

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["companies"])


class CompanyResponse(BaseModel):
    id: int
    name: str
    address: str
    gst_number: str
    hr_name: str
    hr_phone: str
    manager_name: str
    manager_phone: str
    landline_number: str
    email: str
    estimated_orders: int
    total_orders: int
    status: CompanyStatus
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, dt: datetime) -> str:
        """Serialize datetime to shop timezone."""
        localized_dt = to_shop_timezone(dt)
        assert localized_dt is not None
        return localized_dt.isoformat()

    @classmethod
    def from_model(cls, company: Company) -> "CompanyResponse":
        return cls.model_validate(company, from_attributes=True)


class CompanyStatsResponse(BaseModel):
    total_employees: int
    pending: int
    completed: int
    by_position: dict[str, int]


class CompanyCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    address: str = ""
    gst_number: str = ""
    hr_name: str = ""
    hr_phone: str = ""
    manager_name: str = ""
    manager_phone: str = ""
    landline_number: str = ""
    email: str = ""
    estimated_orders: int = Field(default=0, ge=0)


class CompanyUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    address: str | None = None
    gst_number: str | None = None
    hr_name: str | None = None
    hr_phone: str | None = None
    manager_name: str | None = None
    manager_phone: str | None = None
    landline_number: str | None = None
    email: str | None = None
    estimated_orders: int | None = Field(default=None, ge=0)
    status: CompanyStatus | None = None


@router.get("/companies", response_model=list[CompanyResponse], operation_id="listCompanies")
async def list_companies(service: CompanyServiceDep) -> list[CompanyResponse]:
    """List all companies, newest first."""
    return [CompanyResponse.from_model(c) for c in await service.list_companies()]


@router.get("/companies/{company_id}", response_model=CompanyResponse, operation_id="getCompany")
async def get_company(company_id: int, service: CompanyServiceDep) -> CompanyResponse:
    try:
        return CompanyResponse.from_model(await service.get_company(company_id))
    except CompanyNotFound:
        raise HTTPException(status_code=404, detail="Company not found")


@router.post("/companies", response_model=CompanyResponse, status_code=201, operation_id="createCompany")
async def create_company(body: CompanyCreateRequest, service: CompanyServiceDep) -> CompanyResponse:
    try:
        company = await service.create_company(**body.model_dump())
    except CompanyAlreadyExists:
        raise HTTPException(status_code=409, detail="Company with this name already exists")
    return CompanyResponse.from_model(company)


@router.put("/companies/{company_id}", response_model=CompanyResponse, operation_id="updateCompany")
async def update_company(
    company_id: int,
    body: CompanyUpdateRequest,
    service: CompanyServiceDep,
) -> CompanyResponse:
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    try:
        return CompanyResponse.from_model(await service.update_company(company_id, changes))
    except CompanyNotFound:
        raise HTTPException(status_code=404, detail="Company not found")
    except CompanyAlreadyExists:
        raise HTTPException(status_code=409, detail="Company with this name already exists")


@router.delete("/companies/{company_id}", response_model=StatusResponse, operation_id="deleteCompany")
async def delete_company(company_id: int, service: CompanyServiceDep) -> StatusResponse:
    """Delete a company and all of its employee orders."""
    try:
        await service.delete_company(company_id)
    except CompanyNotFound:
        raise HTTPException(status_code=404, detail="Company not found")
    return StatusResponse(status="deleted", message="Company deleted successfully")


@router.get("/companies/{company_id}/orders", response_model=list[OrderResponse], operation_id="listCompanyOrders")
async def list_company_orders(company_id: int, service: CompanyServiceDep) -> list[OrderResponse]:
    """List employee orders of a company."""
    try:
        await service.get_company(company_id)
    except CompanyNotFound:
        raise HTTPException(status_code=404, detail="Company not found")
    orders = await service.orders.list_company_orders(company_id)
    return [OrderResponse.from_model(order) for order in orders]


@router.get("/companies/{company_id}/stats", response_model=CompanyStatsResponse, operation_id="getCompanyStats")
async def get_company_stats(company_id: int, service: CompanyServiceDep) -> CompanyStatsResponse:
    """Order progress of a company's employees."""
    try:
        stats = await service.get_stats(company_id)
    except CompanyNotFound:
        raise HTTPException(status_code=404, detail="Company not found")
    return CompanyStatsResponse(
        total_employees=stats.total_employees,
        pending=stats.pending,
        completed=stats.completed,
        by_position=stats.by_position,
    )
