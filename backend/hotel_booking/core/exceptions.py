"""
Domain failures raised by the booking rule engine.

Only two kinds reach the caller: AuthorizationDenied and NotFound. The
denial reason is kept on the exception for logs and metrics; the HTTP layer
never exposes it.
"""

from enum import Enum


class DenialReason(str, Enum):
    INVALID_TARGET = "invalid_target"
    NOT_ELIGIBLE = "not_eligible"
    ALREADY_BOOKED = "already_booked"
    ROOM_FULL = "room_full"
    NOT_OWNER = "not_owner"
    SAME_ROOM = "same_room"


class BookingError(Exception):
    """Base class for expected booking failures."""


class AuthorizationDenied(BookingError):
    """The user may not perform the requested booking action."""

    def __init__(self, reason: DenialReason):
        self.reason = reason
        super().__init__(f"Booking action denied: {reason.value}")


class NotFound(BookingError):
    """A referenced room or booking does not exist."""

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity} not found")
