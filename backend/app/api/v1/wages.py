"""Wage configuration API endpoints."""

from datetime import datetime

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_serializer

from app.api.v1.dependencies import WageServiceDep
from app.models.wages import WageConfiguration
from app.services.exceptions import ValidationError
from app.utils.datetime_utils import to_shop_timezone

router = APIRouter(tags=["wages"])


class WageConfigurationResponse(BaseModel):
    pant: float
    shirt: float
    ironing_pant: float
    ironing_shirt: float
    embroidery: float
    updated_at: datetime

    @field_serializer("updated_at")
    def serialize_updated_at(self, dt: datetime) -> str:
        """Serialize datetime to shop timezone."""
        localized_dt = to_shop_timezone(dt)
        assert localized_dt is not None
        return localized_dt.isoformat()

    @classmethod
    def from_model(cls, config: WageConfiguration) -> "WageConfigurationResponse":
        return cls.model_validate(config, from_attributes=True)


class WageRatesRequest(BaseModel):
    """All piece rates, in rupees per unit."""

    pant: float = Field(ge=0)
    shirt: float = Field(ge=0)
    ironing_pant: float = Field(ge=0)
    ironing_shirt: float = Field(ge=0)
    embroidery: float = Field(ge=0)


@router.get("/wages", response_model=WageConfigurationResponse, operation_id="getWages")
async def get_wages(service: WageServiceDep) -> WageConfigurationResponse:
    """Current piece rates (defaults are stored on first access)."""
    return WageConfigurationResponse.from_model(await service.get_configuration())


@router.put("/wages", response_model=WageConfigurationResponse, operation_id="updateWages")
async def update_wages(body: WageRatesRequest, service: WageServiceDep) -> WageConfigurationResponse:
    try:
        config = await service.update_rates(body.model_dump())
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return WageConfigurationResponse.from_model(config)


@router.post("/wages/reset", response_model=WageConfigurationResponse, operation_id="resetWages")
async def reset_wages(service: WageServiceDep) -> WageConfigurationResponse:
    """Restore default piece rates."""
    return WageConfigurationResponse.from_model(await service.reset())
