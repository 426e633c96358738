"""
Booking model: a standing assignment of one user to one room.

Key design decisions:
- No unique constraint on user_id; one booking per user is enforced by the
  rule engine under a lock on the user's row
- room_id is mutated in place when a booking is moved, the row keeps its id
- Indexed on room_id for the capacity COUNT and on user_id for the owner lookup
"""

from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship

from hotel_booking.db.base import Base, TimestampMixin


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False, index=True)

    user = relationship("User", back_populates="bookings")
    room = relationship("Room", back_populates="bookings")

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, user={self.user_id}, room={self.room_id})>"
