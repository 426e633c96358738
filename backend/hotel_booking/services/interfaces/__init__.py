"""
Service interfaces for dependency inversion.
The rule engine depends on these, never on a concrete store.
"""

from .stores import BookingStore, EnrollmentStore, RoomStore, TicketStore

__all__ = ['BookingStore', 'EnrollmentStore', 'RoomStore', 'TicketStore']
