"""
Hotel booking endpoints for the authenticated attendee.
Domain failures are translated to 403/404 by the handlers in main.py.
"""

from fastapi import APIRouter, Depends, Path

from hotel_booking.core.security import get_current_user_id
from hotel_booking.schemas.booking import BookingBody, BookingIdResponse, BookingWithRoomResponse
from hotel_booking.services.booking_service import BookingService
from hotel_booking.services.service_factory import get_booking_service

router = APIRouter(prefix="/booking", tags=["Bookings"])

# Plain optional-minus digits only; "+1", "1.0" or " 1" are rejected with 400
BOOKING_ID_PATTERN = r"^-?[0-9]+$"


@router.get("", response_model=BookingWithRoomResponse)
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Get the user's current booking together with its room."""
    return await service.get_booking(user_id)


@router.post("", response_model=BookingIdResponse)
async def create_booking(
    body: BookingBody,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """
    Book a room.

    Requires a paid, in-person ticket that includes hotel. Fails with 403
    when the user already holds a booking or the room is full.
    """
    booking_id = await service.create_booking(user_id, body.room_id)
    return BookingIdResponse(booking_id=booking_id)


@router.put("/{booking_id}", response_model=BookingIdResponse)
async def update_booking(
    body: BookingBody,
    booking_id: str = Path(..., pattern=BOOKING_ID_PATTERN),
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Move the user's booking to a different room. The booking id is unchanged."""
    updated_id = await service.update_booking(user_id, int(booking_id), body.room_id)
    return BookingIdResponse(booking_id=updated_id)
