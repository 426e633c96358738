"""
Hotel eligibility of an attendee.

A user may hold a hotel booking only with an in-person ticket type that
includes hotel, and only once that ticket is paid. Missing enrollment or
ticket data means "not eligible", never an error.
"""

from hotel_booking.models import TicketStatus
from hotel_booking.services.interfaces.stores import EnrollmentStore, TicketStore


class EligibilityChecker:

    def __init__(self, enrollments: EnrollmentStore, tickets: TicketStore):
        self.enrollments = enrollments
        self.tickets = tickets

    async def is_user_allowed(self, user_id: int) -> bool:
        enrollment = await self.enrollments.find_with_address_by_user_id(user_id)
        if not enrollment:
            return False

        ticket = await self.tickets.find_by_enrollment_id(enrollment.id)
        if not ticket:
            return False

        ticket_type = ticket.ticket_type
        is_hostable = not ticket_type.is_remote and ticket_type.includes_hotel
        is_paid = ticket.status == TicketStatus.PAID
        return is_hostable and is_paid
