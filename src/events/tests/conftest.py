from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from events.models import Event, Ticket


@pytest.fixture
def event(next_week: datetime) -> Event:
    """An upcoming event with no form and no registration window."""
    return Event.objects.create(title="Book Club", event_date=next_week, whatsapp_number="15551234567")


@pytest.fixture
def dietary_event(next_week: datetime) -> Event:
    """An upcoming event asking a single required text question."""
    return Event.objects.create(
        title="Supper Club",
        event_date=next_week,
        whatsapp_number="15551234567",
        form_fields=[{"id": "diet", "label": "Dietary", "type": "text", "required": True}],
    )


@pytest.fixture
def full_form_event(next_week: datetime) -> Event:
    """An event whose form uses every field kind."""
    return Event.objects.create(
        title="Reading Retreat",
        event_date=next_week,
        whatsapp_number="15550000000",
        form_fields=[
            {"id": "name", "label": "Full name", "type": "text", "required": True},
            {"id": "mail", "label": "Email", "type": "email", "required": True},
            {"id": "phone", "label": "Phone", "type": "tel"},
            {"id": "room", "label": "Room", "type": "select", "required": True, "options": ["Single", "Shared"]},
            {"id": "coc", "label": "Code of conduct", "type": "checkbox", "required": True},
        ],
    )


@pytest.fixture
def closed_event(next_week: datetime) -> Event:
    """An upcoming event whose registration window has ended."""
    now = timezone.now()
    return Event.objects.create(
        title="Closed Club",
        event_date=next_week,
        registration_start_date=now - timedelta(days=3),
        registration_end_date=now - timedelta(days=1),
    )


@pytest.fixture
def ticket(event: Event) -> Ticket:
    return Ticket.objects.create(event=event, name="Standard", price=Decimal("10.00"), quantity=20)
