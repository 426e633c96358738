from hotel_booking.models import Room
from hotel_booking.services.interfaces.stores import BookingStore


class CapacityChecker:
    """Occupancy check for a single room."""

    def __init__(self, bookings: BookingStore):
        self.bookings = bookings

    async def is_room_full(self, room: Room) -> bool:
        occupants = await self.bookings.count_by_room_id(room.id)
        # >= so a room that was ever overfilled keeps rejecting
        return occupants >= room.capacity
