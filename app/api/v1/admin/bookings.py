from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.schemas.booking import Booking as BookingSchema
from app.schemas.common import ListResponse
from app.services import bookings as booking_service

router = APIRouter(prefix="/admin/bookings", tags=["Admin - Bookings"])


@router.get("/", response_model=ListResponse[BookingSchema])
def list_all_bookings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Every booking with venue and booker summaries."""
    bookings = booking_service.list_all_bookings(db)
    return ListResponse.of([BookingSchema.model_validate(b) for b in bookings])
