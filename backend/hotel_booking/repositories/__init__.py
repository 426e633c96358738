"""
SQLAlchemy implementations of the store interfaces.
Each repository wraps the request's AsyncSession.
"""

from .booking_repository import BookingRepository
from .enrollment_repository import EnrollmentRepository
from .room_repository import RoomRepository
from .ticket_repository import TicketRepository

__all__ = ['BookingRepository', 'EnrollmentRepository', 'RoomRepository', 'TicketRepository']
