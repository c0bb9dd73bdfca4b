import typing as t
from uuid import UUID

from django.db.models import QuerySet
from ninja import Query
from ninja_extra import api_controller, route

from common.auth_base import BaseJWTAuth, PermissionDenied
from common.controllers import UserAwareController
from common.schema import ValidationErrorResponse
from common.throttling import EventRegistrationThrottle
from events import filters, models, schema
from events.service import event_service, registration_service


@api_controller("/events", tags=["Events"])
class EventController(UserAwareController):
    def get_queryset(self) -> QuerySet[models.Event]:
        return event_service.list_public_events()

    @route.get("", url_name="list_events", response=list[schema.EventSchema])
    def list_events(
        self,
        params: filters.EventFilterSchema = Query(...),  # type: ignore[type-arg]
    ) -> QuerySet[models.Event]:
        """Browse events ordered by date, earliest first, with their registration form and tickets.

        `registration_open` tells whether the event currently takes registrations.
        """
        return params.filter(self.get_queryset())

    @route.post(
        "/register",
        url_name="register_for_event",
        auth=BaseJWTAuth(),
        throttle=EventRegistrationThrottle(),
        response={201: schema.RegistrationResultSchema, 400: ValidationErrorResponse},
    )
    def register(self, payload: schema.RegistrationCreateSchema) -> tuple[int, schema.RegistrationResultSchema]:
        """Register for an event by answering its form.

        Answers are keyed by field id (field labels are accepted too). On success the response carries
        the new registration id and a WhatsApp link to message the organizers. Registering someone else
        through `user_id` is reserved to administrators.
        """
        user = self.user()
        user_id = payload.user_id or user.pk
        if user_id != user.pk and not user.is_staff:
            raise PermissionDenied("Only administrators can register other users.")
        result = registration_service.register(
            user_id=user_id,
            event_id=payload.event_id,
            ticket_id=payload.ticket_id,
            answers=payload.form_responses,
        )
        return 201, result

    @route.get("/{uuid:event_id}", url_name="get_event", response=schema.EventSchema)
    def get_event(self, event_id: UUID) -> models.Event:
        """Retrieve one event with its registration form and tickets."""
        return t.cast(models.Event, self.get_object_or_exception(self.get_queryset(), pk=event_id))
