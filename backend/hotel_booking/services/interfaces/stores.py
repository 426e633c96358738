"""
Store interfaces consumed by the booking rule engine.
Allows the engine to run against SQLAlchemy repositories or in-memory fakes.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hotel_booking.models import Booking, Enrollment, Room, Ticket


class EnrollmentStore(ABC):

    @abstractmethod
    async def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        """Return the user's enrollment (address loaded), or None."""
        pass


class TicketStore(ABC):

    @abstractmethod
    async def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """Return the enrollment's ticket with its ticket type loaded, or None."""
        pass


class RoomStore(ABC):

    @abstractmethod
    async def find_by_id(self, room_id: int, for_update: bool = False) -> Optional[Room]:
        """
        Return the room, or None.

        Args:
            room_id: Room to load
            for_update: Lock the room row until the transaction ends, so the
                capacity count and the following write cannot interleave with
                another booking into the same room
        """
        pass


class BookingStore(ABC):

    @abstractmethod
    async def find_by_id(self, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def find_with_room_by_user_id(self, user_id: int) -> Optional[Booking]:
        """Return the user's first booking with its room loaded, or None."""
        pass

    @abstractmethod
    async def count_by_room_id(self, room_id: int) -> int:
        pass

    @abstractmethod
    async def create(self, user_id: int, room_id: int) -> Booking:
        pass

    @abstractmethod
    async def update_room(self, booking_id: int, room_id: int) -> Booking:
        pass

    @abstractmethod
    async def lock_user(self, user_id: int) -> None:
        """
        Serialise booking writes of one user until the transaction ends.
        Must be taken before the room lock.
        """
        pass
