
from app.models.user import User, UserRole
from app.models.district import District
from app.models.venue import Venue, VenueStatus
from app.models.image import Image
from app.models.booking import Booking, BookingStatus
