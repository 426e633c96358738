"""
Event enrollment and its postal address.
Written by the registration flow; the booking module only reads them.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from hotel_booking.db.base import Base, TimestampMixin


class Enrollment(Base, TimestampMixin):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    cpf = Column(String(20), nullable=False)
    phone = Column(String(30), nullable=False)

    user = relationship("User", back_populates="enrollment")
    address = relationship("Address", back_populates="enrollment", uselist=False)
    ticket = relationship("Ticket", back_populates="enrollment", uselist=False)

    def __repr__(self) -> str:
        return f"<Enrollment(id={self.id}, user={self.user_id})>"


class Address(Base, TimestampMixin):
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, index=True)
    enrollment_id = Column(Integer, ForeignKey("enrollments.id"), nullable=False, unique=True)
    cep = Column(String(20), nullable=False)
    street = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    state = Column(String(255), nullable=False)
    number = Column(String(20), nullable=False)
    neighborhood = Column(String(255), nullable=False)
    address_detail = Column(String(255), nullable=True)

    enrollment = relationship("Enrollment", back_populates="address")
