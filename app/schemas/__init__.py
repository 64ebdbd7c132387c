from app.schemas.common import (
    DataResponse, ListResponse, MessageResponse, ErrorResponse, FieldError, ERROR_RESPONSES,
)
from app.schemas.user import (
    User, UserDetail, UserSummary, UserCreate, UserUpdate, RegisterRequest,
    AdminCreate, LoginRequest, ProfileUpdate, Token,
)
from app.schemas.image import Image, ImageCreate, ImageUpdate, ImageWithVenue
from app.schemas.venue import (
    Venue, VenueCreate, VenueUpdate, VenueDetail, VenueFilter, VenueSummary, VenueBooking,
)
from app.schemas.district import District, DistrictCreate, DistrictUpdate, DistrictDetail
from app.schemas.booking import (
    Booking, BookingCreate, BookingUpdate, BookingStatusUpdate, BookingVenueSummary,
)
