"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from hotel_booking.api.routes import bookings
from hotel_booking.core.config import get_settings

api_router = APIRouter(prefix=get_settings().API_PREFIX)
api_router.include_router(bookings.router)
