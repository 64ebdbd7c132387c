from __future__ import annotations

from typing import Optional, List
from pydantic import BaseModel, Field, UUID4, field_validator
from datetime import datetime


class DistrictBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class DistrictCreate(DistrictBase):
    pass


class DistrictUpdate(DistrictBase):
    pass


class District(DistrictBase):
    id: UUID4
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# GET /districts/{id}: every venue in the district, regardless of status
class DistrictDetail(District):
    venues: List[VenueSummary] = []

    class Config:
        from_attributes = True


# Import at the bottom to avoid circular imports
from app.schemas.venue import VenueSummary  # noqa: E402

DistrictDetail.model_rebuild()
