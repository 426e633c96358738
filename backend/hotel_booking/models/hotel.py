"""
Hotels and their rooms.

Key design decisions:
- capacity is a fixed integer per room, never below 1 (CHECK constraint)
- Rooms are read-only for the booking module; the room row doubles as the
  lock target that serialises bookings into it
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from hotel_booking.db.base import Base, TimestampMixin


class Hotel(Base, TimestampMixin):
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    image = Column(String(1000), nullable=False)

    rooms = relationship("Room", back_populates="hotel")

    def __repr__(self) -> str:
        return f"<Hotel(id={self.id}, name={self.name})>"


class Room(Base, TimestampMixin):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    capacity = Column(Integer, nullable=False)
    hotel_id = Column(Integer, ForeignKey("hotels.id"), nullable=False, index=True)

    hotel = relationship("Hotel", back_populates="rooms")
    bookings = relationship("Booking", back_populates="room")

    __table_args__ = (
        CheckConstraint("capacity >= 1", name="check_room_capacity_positive"),
    )

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, hotel={self.hotel_id}, capacity={self.capacity})>"
