"""
Booking persistence.

The capacity COUNT and the write that follows it are only safe when the
caller holds the room row lock (RoomStore.find_by_id(..., for_update=True))
inside the same transaction. On PostgreSQL under READ COMMITTED, a request
blocked on that lock re-reads committed rows once it acquires it, so its
COUNT sees every booking committed by the request it waited for.
"""

from typing import Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from hotel_booking.models import Booking, User
from hotel_booking.services.interfaces.stores import BookingStore


def user_lock_statement(user_id: int) -> Select:
    # FOR NO KEY UPDATE: still exclusive between booking writers of this user,
    # but does not block FOR KEY SHARE taken by inserts referencing users.id
    return select(User.id).where(User.id == user_id).with_for_update(key_share=True)


class BookingRepository(BookingStore):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, booking_id: int) -> Optional[Booking]:
        return await self.db.get(Booking, booking_id)

    async def find_with_room_by_user_id(self, user_id: int) -> Optional[Booking]:
        result = await self.db.execute(
            select(Booking)
            .options(joinedload(Booking.room))
            .where(Booking.user_id == user_id)
            .order_by(Booking.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def count_by_room_id(self, room_id: int) -> int:
        result = await self.db.execute(
            select(func.count(Booking.id)).where(Booking.room_id == room_id)
        )
        return result.scalar_one()

    async def create(self, user_id: int, room_id: int) -> Booking:
        booking = Booking(user_id=user_id, room_id=room_id)
        self.db.add(booking)
        await self.db.flush()
        await self.db.refresh(booking)
        return booking

    async def update_room(self, booking_id: int, room_id: int) -> Booking:
        booking = await self.db.get(Booking, booking_id)
        booking.room_id = room_id
        await self.db.flush()
        # room may still point at the old row if it was eager-loaded earlier
        await self.db.refresh(booking, ["room_id", "updated_at", "room"])
        return booking

    async def lock_user(self, user_id: int) -> None:
        await self.db.execute(user_lock_statement(user_id))
