from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.schemas.common import DataResponse, ListResponse, MessageResponse
from app.schemas.district import (
    DistrictCreate,
    DistrictUpdate,
    District as DistrictSchema,
    DistrictDetail,
)
from app.schemas.venue import Venue as VenueSchema
from app.services import districts as district_service

router = APIRouter(prefix="/districts", tags=["Districts"])


@router.get("/", response_model=ListResponse[DistrictSchema])
def list_districts(db: Session = Depends(get_db)):
    districts = district_service.list_districts(db)
    return ListResponse.of([DistrictSchema.model_validate(d) for d in districts])


@router.get("/{district_id}", response_model=DataResponse[DistrictDetail])
def get_district(district_id: UUID, db: Session = Depends(get_db)):
    district = district_service.get_district(db, district_id)
    return DataResponse(data=DistrictDetail.model_validate(district))


@router.get("/{district_id}/venues", response_model=ListResponse[VenueSchema])
def list_district_venues(district_id: UUID, db: Session = Depends(get_db)):
    """Approved venues in the district, with their images."""
    venues = district_service.list_approved_venues(db, district_id)
    return ListResponse.of([VenueSchema.model_validate(v) for v in venues])


# ---------------------------------------------------------------------------
# Admin mutations
# ---------------------------------------------------------------------------


@router.post("/", response_model=DataResponse[DistrictSchema], status_code=status.HTTP_201_CREATED)
def create_district(
    data: DistrictCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    district = district_service.create_district(db, data)
    return DataResponse(data=DistrictSchema.model_validate(district))


@router.put("/{district_id}", response_model=DataResponse[DistrictSchema])
def update_district(
    district_id: UUID,
    data: DistrictUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    district = district_service.update_district(db, district_id, data)
    return DataResponse(data=DistrictSchema.model_validate(district))


@router.delete("/{district_id}", response_model=MessageResponse)
def delete_district(
    district_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    district_service.delete_district(db, district_id)
    return MessageResponse(message="District removed")
