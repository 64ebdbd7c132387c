from fastapi import APIRouter

from app.schemas.common import ERROR_RESPONSES

# Auth
from app.api.v1.public.auth import router as auth_router

# Public: user profile & owned resources
from app.api.v1.public.me import router as me_router

# Public: discovery and owner/booker mutations
from app.api.v1.public.districts import router as districts_router
from app.api.v1.public.venues import router as venues_router
from app.api.v1.public.images import router as images_router
from app.api.v1.public.bookings import router as bookings_router

# Admin
from app.api.v1.admin.users import router as admin_users_router
from app.api.v1.admin.venues import router as admin_venues_router
from app.api.v1.admin.bookings import router as admin_bookings_router
from app.api.v1.admin.images import router as admin_images_router

api_router = APIRouter(responses=ERROR_RESPONSES)

# --- Auth ---
api_router.include_router(auth_router)

# --- Public: profile ---
api_router.include_router(me_router)

# --- Public: resources ---
api_router.include_router(districts_router)
api_router.include_router(venues_router)
api_router.include_router(images_router)
api_router.include_router(bookings_router)

# --- Admin ---
api_router.include_router(admin_users_router)
api_router.include_router(admin_venues_router)
api_router.include_router(admin_bookings_router)
api_router.include_router(admin_images_router)
