import typing as t

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models
from django.db.models import Prefetch

from common.models import TimeStampedModel

if t.TYPE_CHECKING:
    from events.schema.form import FormField


class EventQuerySet(models.QuerySet["Event"]):
    def upcoming(self) -> t.Self:
        """Events whose status is still upcoming."""
        return self.filter(status=Event.EventStatus.UPCOMING)

    def chronological(self) -> t.Self:
        """Order by event date, earliest first."""
        return self.order_by("event_date", "created_at")

    def with_tickets(self) -> t.Self:
        """Prefetch tickets in insertion order."""
        from .ticket import Ticket

        return self.prefetch_related(Prefetch("tickets", queryset=Ticket.objects.order_by("position", "created_at")))

    def with_admin_details(self) -> t.Self:
        """Prefetch tickets, registrations (with their registrant) and contact channels.

        Keeps the admin overview at a constant number of queries regardless of the number of events.
        """
        from .registration import Registration

        return self.with_tickets().prefetch_related(
            Prefetch(
                "registrations",
                queryset=Registration.objects.select_related("user").order_by("-created_at"),
            ),
            Prefetch("contact_channels", queryset=ContactChannel.objects.order_by("position", "created_at")),
        )


class EventManager(models.Manager["Event"]):
    def get_queryset(self) -> EventQuerySet:
        """Get base queryset for events."""
        return EventQuerySet(self.model, using=self._db)

    def upcoming(self) -> EventQuerySet:
        """Returns the upcoming events."""
        return self.get_queryset().upcoming()

    def with_admin_details(self) -> EventQuerySet:
        """Returns a queryset prefetching everything the admin overview shows."""
        return self.get_queryset().with_admin_details()


class Event(TimeStampedModel):
    class EventType(models.TextChoices):
        ONLINE = "online"
        PHYSICAL = "physical"

    class EventStatus(models.TextChoices):
        UPCOMING = "upcoming"
        CLOSED = "closed"
        COMPLETED = "completed"

    title = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default="")
    event_date = models.DateTimeField(db_index=True)
    location = models.CharField(max_length=255, blank=True, default="")
    event_type = models.CharField(choices=EventType.choices, max_length=20, default=EventType.PHYSICAL)
    # Any transition between statuses is allowed; only UPCOMING accepts registrations.
    status = models.CharField(
        choices=EventStatus.choices, max_length=20, default=EventStatus.UPCOMING, db_index=True
    )
    whatsapp_number = models.CharField(
        max_length=32, blank=True, default="", help_text="Primary contact channel used for the post-registration link"
    )
    form_fields = models.JSONField(
        null=True, blank=True, default=list, help_text="Ordered list of registration form field definitions"
    )
    registration_start_date = models.DateTimeField(
        null=True, blank=True, help_text="Registrations open at this time (inclusive)"
    )
    registration_end_date = models.DateTimeField(
        null=True, blank=True, help_text="Registrations close at this time (exclusive)"
    )

    objects = EventManager()

    class Meta:
        ordering = ["event_date"]
        indexes = [
            models.Index(fields=["status", "event_date"], name="idx_event_status_date"),
        ]

    def __str__(self) -> str:
        return self.title

    def clean(self) -> None:
        """Validate the registration window and the form field definitions."""
        from events.service.form_schema import FormSchemaError, dump_form_fields, parse_form_fields

        super().clean()
        errors: dict[str, list[str]] = {}
        if not self.title or not self.title.strip():
            errors.setdefault("title", []).append("Title must not be empty.")
        if (
            self.registration_start_date
            and self.registration_end_date
            and self.registration_end_date <= self.registration_start_date
        ):
            errors.setdefault("registration_end_date", []).append("Registration must close after it opens.")
        try:
            # Stored in canonical form: a JSON list with generated ids filled in
            self.form_fields = dump_form_fields(parse_form_fields(self.form_fields))
        except FormSchemaError as e:
            errors.setdefault("form_fields", []).extend(e.messages)
        if errors:
            raise DjangoValidationError(errors)

    @property
    def form_schema(self) -> list["FormField"]:
        """The parsed registration form; an event without fields has an empty form."""
        from events.service.form_schema import parse_form_fields

        return parse_form_fields(self.form_fields)


class ContactChannel(TimeStampedModel):
    """An additional phone number attached to an event.

    Only the event's ``whatsapp_number`` is used for the post-registration link.
    """

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="contact_channels")
    phone_number = models.CharField(max_length=32)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["position", "created_at"]

    def __str__(self) -> str:
        return self.phone_number
