"""
Booking rule engine: fetch, create and move a user's hotel-room booking.

CONCURRENCY STRATEGY: Row Locks inside the Request Transaction
==============================================================

Problem:
  Capacity is enforced as "count bookings on the room, then insert".
  Two users booking the last bed simultaneously both count capacity - 1,
  both insert. Result: an overfilled room.
  The same read-then-act shape exists for "user has no booking yet" and
  "booking belongs to user" when one user fires duplicate requests.

Solution:
  Every operation runs in the single transaction opened by get_db.

  1. create/update lock the acting user's row (SELECT ... FOR UPDATE)
     before any booking lookup for that user
  2. The target room is loaded with SELECT ... FOR UPDATE
  3. The capacity COUNT runs after the room lock is held
  4. The insert/update is the last statement; locks release on commit

  Lock order is always user row, then room row, so two requests never wait
  on each other in a cycle.

Alternative approaches considered:
  - Optimistic version column on rooms: needs a denormalised occupancy
    counter kept in sync with bookings. More moving parts for no gain here.
  - SERIALIZABLE isolation: correct, but every conflict surfaces as a
    serialization failure that callers would have to retry.

Gate order matters: the first failing gate decides the error, and nothing
is written before every gate has passed.
"""

from hotel_booking.core.exceptions import AuthorizationDenied, DenialReason, NotFound
from hotel_booking.core.logging import get_logger
from hotel_booking.core.metrics import booking_latency, record_booking_operation
from hotel_booking.models import Booking
from hotel_booking.services.capacity import CapacityChecker
from hotel_booking.services.eligibility import EligibilityChecker
from hotel_booking.services.interfaces.stores import BookingStore, RoomStore

logger = get_logger(__name__)


class BookingService:

    def __init__(
        self,
        bookings: BookingStore,
        rooms: RoomStore,
        eligibility: EligibilityChecker,
        capacity: CapacityChecker,
    ):
        self.bookings = bookings
        self.rooms = rooms
        self.eligibility = eligibility
        self.capacity = capacity

    async def get_booking(self, user_id: int) -> Booking:
        """Return the user's booking with its room loaded."""
        with booking_latency.labels(operation="get").time():
            if not await self.eligibility.is_user_allowed(user_id):
                raise self._denied("get", DenialReason.NOT_ELIGIBLE, user_id=user_id)

            booking = await self.bookings.find_with_room_by_user_id(user_id)
            if not booking:
                raise self._not_found("get", "booking", user_id=user_id)

        record_booking_operation("get", "success")
        return booking

    async def create_booking(self, user_id: int, room_id: int) -> int:
        """Book a room for a user who holds no booking yet. Returns the new booking id."""
        with booking_latency.labels(operation="create").time():
            if room_id < 1:
                raise self._denied("create", DenialReason.INVALID_TARGET, user_id=user_id, room_id=room_id)

            if not await self.eligibility.is_user_allowed(user_id):
                raise self._denied("create", DenialReason.NOT_ELIGIBLE, user_id=user_id)

            await self.bookings.lock_user(user_id)
            if await self.bookings.find_with_room_by_user_id(user_id):
                raise self._denied("create", DenialReason.ALREADY_BOOKED, user_id=user_id)

            room = await self.rooms.find_by_id(room_id, for_update=True)
            if not room:
                raise self._not_found("create", "room", user_id=user_id, room_id=room_id)

            if await self.capacity.is_room_full(room):
                raise self._denied("create", DenialReason.ROOM_FULL, user_id=user_id, room_id=room_id)

            booking = await self.bookings.create(user_id, room_id)

        logger.info("booking_created", booking_id=booking.id, user_id=user_id, room_id=room_id)
        record_booking_operation("create", "success")
        return booking.id

    async def update_booking(self, user_id: int, booking_id: int, room_id: int) -> int:
        """
        Move the user's booking to another room.
        The booking keeps its id; that id is returned.
        """
        with booking_latency.labels(operation="update").time():
            if room_id < 1 or booking_id < 1:
                raise self._denied(
                    "update", DenialReason.INVALID_TARGET,
                    user_id=user_id, booking_id=booking_id, room_id=room_id,
                )

            if not await self.eligibility.is_user_allowed(user_id):
                raise self._denied("update", DenialReason.NOT_ELIGIBLE, user_id=user_id)

            await self.bookings.lock_user(user_id)
            room = await self.rooms.find_by_id(room_id, for_update=True)
            booking = await self.bookings.find_by_id(booking_id)
            if not (room and booking):
                raise self._not_found(
                    "update", "room_or_booking",
                    user_id=user_id, booking_id=booking_id, room_id=room_id,
                )

            # Ownership is decided by the user's own booking, not by the path id
            user_booking = await self.bookings.find_with_room_by_user_id(user_id)
            if not user_booking or user_booking.id != booking_id:
                raise self._denied("update", DenialReason.NOT_OWNER, user_id=user_id, booking_id=booking_id)

            if booking.room_id == room_id:
                raise self._denied("update", DenialReason.SAME_ROOM, user_id=user_id, booking_id=booking_id)

            if await self.capacity.is_room_full(room):
                raise self._denied("update", DenialReason.ROOM_FULL, user_id=user_id, room_id=room_id)

            previous_room_id = booking.room_id
            await self.bookings.update_room(booking_id, room_id)

        logger.info(
            "booking_moved",
            booking_id=booking_id,
            user_id=user_id,
            from_room_id=previous_room_id,
            to_room_id=room_id,
        )
        record_booking_operation("update", "success")
        return booking_id

    @staticmethod
    def _denied(operation: str, reason: DenialReason, **context) -> AuthorizationDenied:
        logger.warning("booking_denied", operation=operation, reason=reason.value, **context)
        record_booking_operation(operation, reason.value)
        return AuthorizationDenied(reason)

    @staticmethod
    def _not_found(operation: str, entity: str, **context) -> NotFound:
        logger.info("booking_not_found", operation=operation, entity=entity, **context)
        record_booking_operation(operation, "not_found")
        return NotFound(entity)
