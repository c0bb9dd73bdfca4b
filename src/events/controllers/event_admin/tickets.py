from uuid import UUID

from django.db.models import QuerySet
from ninja_extra import api_controller, route

from common.auth_base import AdminJWTAuth
from common.schema import ValidationErrorResponse
from common.throttling import UserDefaultThrottle, WriteThrottle
from events import models, schema
from events.service import ticket_service

from .base import EventAdminBaseController


@api_controller("/admin/events/{event_id}", auth=AdminJWTAuth(), tags=["Event Admin"], throttle=WriteThrottle())
class EventAdminTicketsController(EventAdminBaseController):
    """Event ticket inventory endpoints."""

    @route.get(
        "/tickets",
        url_name="list_tickets",
        response=list[schema.TicketSchema],
        throttle=UserDefaultThrottle(),
    )
    def list_tickets(self, event_id: UUID) -> QuerySet[models.Ticket]:
        """List the event's tickets in display order."""
        return ticket_service.list_tickets(self.get_one(event_id))

    @route.put(
        "/tickets",
        url_name="replace_tickets",
        response={200: list[schema.TicketSchema], 400: ValidationErrorResponse},
    )
    def replace_tickets(self, event_id: UUID, payload: schema.TicketReplaceSchema) -> list[models.Ticket]:
        """Replace all of the event's tickets with the given list.

        Registrations that referenced a removed ticket keep its name but lose the link.
        """
        return ticket_service.replace_tickets(self.get_one(event_id), payload.tickets)
