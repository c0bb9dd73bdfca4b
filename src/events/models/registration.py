import typing as t

from django.conf import settings
from django.db import models

from common.models import TimeStampedModel

from .event import Event
from .ticket import Ticket


class RegistrationQuerySet(models.QuerySet["Registration"]):
    def with_user(self) -> t.Self:
        """Select the registrant."""
        return self.select_related("user")


class Registration(TimeStampedModel):
    """One registration attempt of a user for an event.

    Registrations are written once; the answers are validated against the event's form at creation time
    and are not re-validated when the form later changes. The ticket link is nulled when tickets are
    replaced, the ``ticket_name`` snapshot keeps what was chosen.
    """

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="event_registrations")
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="registrations")
    ticket = models.ForeignKey(
        Ticket, on_delete=models.SET_NULL, null=True, blank=True, related_name="registrations"
    )
    ticket_name = models.CharField(max_length=255, blank=True, default="")
    form_responses = models.JSONField(null=True, blank=True, default=dict)

    objects = RegistrationQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["event", "created_at"], name="idx_registration_event_created"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.event_id}"

    @property
    def answers(self) -> dict[str, str | bool]:
        """The stored answers; a registration without answers has an empty mapping."""
        from events.service.form_schema import parse_form_responses

        return parse_form_responses(self.form_responses)
