from datetime import datetime

import pytest

from books.models import Book
from events.models import Event


@pytest.fixture
def event(next_week: datetime) -> Event:
    return Event.objects.create(title="Book Club", event_date=next_week, whatsapp_number="15551234567")


@pytest.fixture
def book() -> Book:
    """A plain catalogue entry, not featured and not linked to an event."""
    return Book.objects.create(title="Middlemarch", author="George Eliot", category="Classic")


@pytest.fixture
def featured_book(event: Event) -> Book:
    """A featured book discussed at ``event``."""
    return Book.objects.create(
        title="The Great Gatsby",
        author="F. Scott Fitzgerald",
        category="Classic",
        cover="https://picsum.photos/seed/gatsby/400/600",
        is_featured=True,
        event=event,
    )
