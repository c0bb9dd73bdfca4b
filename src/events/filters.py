# src/events/filters.py

from django.db.models import Q
from django.utils import timezone
from ninja import FilterSchema

from events.models import Event


class EventFilterSchema(FilterSchema):
    event_type: Event.EventType | None = None
    status: Event.EventStatus | None = None
    next_events: bool | None = None
    past_events: bool | None = None

    def filter_next_events(self, next_events: bool | None) -> Q:
        """Helper to find events that haven't happened yet."""
        if next_events:
            return Q(event_date__gte=timezone.now())
        return Q()

    def filter_past_events(self, past_events: bool | None) -> Q:
        """Helper to find past events only."""
        if past_events:
            return Q(event_date__lt=timezone.now())
        return Q()
