"""
Wires the booking rule engine to the request's database session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.db.session import get_db
from hotel_booking.repositories import (
    BookingRepository, EnrollmentRepository, RoomRepository, TicketRepository,
)
from hotel_booking.services.booking_service import BookingService
from hotel_booking.services.capacity import CapacityChecker
from hotel_booking.services.eligibility import EligibilityChecker


def build_booking_service(db: AsyncSession) -> BookingService:
    bookings = BookingRepository(db)
    return BookingService(
        bookings=bookings,
        rooms=RoomRepository(db),
        eligibility=EligibilityChecker(EnrollmentRepository(db), TicketRepository(db)),
        capacity=CapacityChecker(bookings),
    )


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    """FastAPI dependency: one rule engine per request, sharing its transaction."""
    return build_booking_service(db)
