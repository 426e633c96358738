"""
In-memory store implementations for unit-testing the rule engine.
Models are transient SQLAlchemy instances; nothing touches a database.
"""

from itertools import count
from typing import Optional

from hotel_booking.models import Booking, Enrollment, Room, Ticket, TicketStatus, TicketType
from hotel_booking.services.booking_service import BookingService
from hotel_booking.services.capacity import CapacityChecker
from hotel_booking.services.eligibility import EligibilityChecker
from hotel_booking.services.interfaces.stores import (
    BookingStore, EnrollmentStore, RoomStore, TicketStore,
)


class FakeDatabase:
    def __init__(self):
        self.enrollments: dict[int, Enrollment] = {}
        self.tickets: dict[int, Ticket] = {}
        self.rooms: dict[int, Room] = {}
        self.bookings: dict[int, Booking] = {}
        self.locks: list[tuple[str, int]] = []
        self.writes = 0
        self._ids = count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def add_enrollment(self, user_id: int) -> Enrollment:
        enrollment = Enrollment(id=self.next_id(), user_id=user_id)
        self.enrollments[user_id] = enrollment
        return enrollment

    def add_ticket(
        self,
        enrollment: Enrollment,
        is_remote: bool = False,
        includes_hotel: bool = True,
        status: TicketStatus = TicketStatus.PAID,
    ) -> Ticket:
        ticket_type = TicketType(id=self.next_id(), is_remote=is_remote, includes_hotel=includes_hotel)
        ticket = Ticket(id=self.next_id(), enrollment_id=enrollment.id, status=status)
        ticket.ticket_type = ticket_type
        self.tickets[enrollment.id] = ticket
        return ticket

    def add_eligible_user(self, user_id: int) -> None:
        self.add_ticket(self.add_enrollment(user_id))

    def add_room(self, capacity: int = 3) -> Room:
        room = Room(id=self.next_id(), capacity=capacity, hotel_id=1)
        self.rooms[room.id] = room
        return room

    def add_booking(self, user_id: int, room_id: int) -> Booking:
        booking = Booking(id=self.next_id(), user_id=user_id, room_id=room_id)
        booking.room = self.rooms.get(room_id)
        self.bookings[booking.id] = booking
        return booking

    def occupants(self, room_id: int) -> int:
        return sum(1 for b in self.bookings.values() if b.room_id == room_id)

    def bookings_of(self, user_id: int) -> list[Booking]:
        return [b for b in self.bookings.values() if b.user_id == user_id]


class FakeEnrollmentStore(EnrollmentStore):
    def __init__(self, db: FakeDatabase):
        self.db = db

    async def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        return self.db.enrollments.get(user_id)


class FakeTicketStore(TicketStore):
    def __init__(self, db: FakeDatabase):
        self.db = db

    async def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        return self.db.tickets.get(enrollment_id)


class FakeRoomStore(RoomStore):
    def __init__(self, db: FakeDatabase):
        self.db = db

    async def find_by_id(self, room_id: int, for_update: bool = False) -> Optional[Room]:
        if for_update:
            self.db.locks.append(("room", room_id))
        return self.db.rooms.get(room_id)


class FakeBookingStore(BookingStore):
    def __init__(self, db: FakeDatabase):
        self.db = db

    async def find_by_id(self, booking_id: int) -> Optional[Booking]:
        return self.db.bookings.get(booking_id)

    async def find_with_room_by_user_id(self, user_id: int) -> Optional[Booking]:
        owned = sorted(self.db.bookings_of(user_id), key=lambda b: b.id)
        return owned[0] if owned else None

    async def count_by_room_id(self, room_id: int) -> int:
        return self.db.occupants(room_id)

    async def create(self, user_id: int, room_id: int) -> Booking:
        self.db.writes += 1
        return self.db.add_booking(user_id, room_id)

    async def update_room(self, booking_id: int, room_id: int) -> Booking:
        self.db.writes += 1
        booking = self.db.bookings[booking_id]
        booking.room_id = room_id
        booking.room = self.db.rooms[room_id]
        return booking

    async def lock_user(self, user_id: int) -> None:
        self.db.locks.append(("user", user_id))


def build_fake_service(db: FakeDatabase) -> BookingService:
    bookings = FakeBookingStore(db)
    return BookingService(
        bookings=bookings,
        rooms=FakeRoomStore(db),
        eligibility=EligibilityChecker(FakeEnrollmentStore(db), FakeTicketStore(db)),
        capacity=CapacityChecker(bookings),
    )
