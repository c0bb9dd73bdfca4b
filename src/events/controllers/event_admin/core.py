from uuid import UUID

from django.db.models import QuerySet
from ninja_extra import api_controller, route, status

from common.auth_base import AdminJWTAuth
from common.schema import ValidationErrorResponse
from common.throttling import UserDefaultThrottle, WriteThrottle
from events import models, schema
from events.service import event_service

from .base import EventAdminBaseController


@api_controller("/admin/events", auth=AdminJWTAuth(), tags=["Event Admin"], throttle=WriteThrottle())
class EventAdminCoreController(EventAdminBaseController):
    """Event CRUD for club administrators."""

    def get_detailed(self, event_id: UUID) -> models.Event:
        return event_service.list_events_for_admin().get(pk=event_id)

    @route.get(
        "", url_name="admin_list_events", response=list[schema.EventAdminSchema], throttle=UserDefaultThrottle()
    )
    def list_events(self) -> QuerySet[models.Event]:
        """List every event with its tickets, registrations (with registrant name and email) and contacts."""
        return event_service.list_events_for_admin()

    @route.post(
        "",
        url_name="create_event",
        response={201: schema.EventAdminSchema, 400: ValidationErrorResponse},
    )
    def create_event(self, payload: schema.EventCreateSchema) -> tuple[int, models.Event]:
        """Create an event, optionally with its tickets and additional contact numbers."""
        event = event_service.create_event(payload)
        return status.HTTP_201_CREATED, self.get_detailed(event.pk)

    @route.get(
        "/{event_id}", url_name="admin_get_event", response=schema.EventAdminSchema, throttle=UserDefaultThrottle()
    )
    def get_event(self, event_id: UUID) -> models.Event:
        """Retrieve one event with everything attached to it."""
        self.get_one(event_id)
        return self.get_detailed(event_id)

    @route.put(
        "/{event_id}",
        url_name="edit_event",
        response={200: schema.EventAdminSchema, 400: ValidationErrorResponse},
    )
    def update_event(self, event_id: UUID, payload: schema.EventEditSchema) -> models.Event:
        """Update an event in place.

        Omitted fields are left as they are. `tickets` and `contact_numbers`, when present, replace the
        current sets. Existing registrations are kept.
        """
        event = event_service.update_event(self.get_one(event_id), payload)
        return self.get_detailed(event.pk)

    @route.delete("/{event_id}", url_name="delete_event", response={204: None})
    def delete_event(self, event_id: UUID) -> tuple[int, None]:
        """Delete an event with its registrations, tickets and contacts."""
        event_service.delete_event(self.get_one(event_id))
        return 204, None
