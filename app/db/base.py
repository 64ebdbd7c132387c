from app.db.session import Base
from app.models.user import User
from app.models.district import District
from app.models.venue import Venue
from app.models.image import Image
from app.models.booking import Booking
