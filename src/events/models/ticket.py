import typing as t
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from common.models import TimeStampedModel

from .event import Event

DEFAULT_TICKET_NAME = "General Admission"


class TicketQuerySet(models.QuerySet["Ticket"]):
    def for_event(self, event: Event) -> t.Self:
        """The event's tickets in insertion order."""
        return self.filter(event=event).order_by("position", "created_at")


class Ticket(TimeStampedModel):
    """A ticket type offered for an event.

    Quantity is advisory: registrations never decrement it.
    """

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tickets")
    name = models.CharField(max_length=255, default=DEFAULT_TICKET_NAME)
    price = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("0"), validators=[MinValueValidator(Decimal("0"))]
    )
    quantity = models.PositiveIntegerField(default=100)
    position = models.PositiveIntegerField(default=0, help_text="Display order within the event")

    objects = TicketQuerySet.as_manager()

    class Meta:
        ordering = ["position", "created_at"]

    def __str__(self) -> str:
        return f"{self.name} ({self.event_id})"
