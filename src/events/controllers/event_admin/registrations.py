from uuid import UUID

from django.db.models import QuerySet
from ninja_extra import api_controller, route

from common.auth_base import AdminJWTAuth
from common.throttling import UserDefaultThrottle, WriteThrottle
from events import models, schema
from events.service import registration_service

from .base import EventAdminBaseController


@api_controller("/admin", auth=AdminJWTAuth(), tags=["Event Admin"], throttle=WriteThrottle())
class EventAdminRegistrationsController(EventAdminBaseController):
    """Registration ledger endpoints for administrators."""

    @route.get(
        "/events/{event_id}/registrations",
        url_name="list_registrations",
        response=list[schema.RegistrationAdminSchema],
        throttle=UserDefaultThrottle(),
    )
    def list_registrations(self, event_id: UUID) -> QuerySet[models.Registration]:
        """List an event's registrations with the registrant's name and email, newest first."""
        return registration_service.list_registrations(self.get_one(event_id))

    @route.delete("/registrations/{registration_id}", url_name="delete_registration", response={204: None})
    def delete_registration(self, registration_id: UUID) -> tuple[int, None]:
        """Delete a registration. Deleting an unknown registration also answers 204."""
        registration_service.deregister(registration_id)
        return 204, None
