from datetime import datetime, timedelta

import pytest
from django.core.exceptions import ValidationError
from django.utils import timezone

from accounts.models import ClubUser
from events.models import ContactChannel, Event, Registration, Ticket
from events.schema import EventCreateSchema, EventEditSchema
from events.service import event_service

pytestmark = pytest.mark.django_db


def _create_payload(next_week: datetime, **kwargs: object) -> EventCreateSchema:
    data: dict[str, object] = {
        "title": "  Spring Book Swap ",
        "event_date": next_week,
        "whatsapp_number": "15551234567",
        "form_fields": [{"label": "Dietary", "required": True}],
        "tickets": [{"name": "Standard", "price": "10.00"}, {"name": "Supporter", "price": "25.00"}],
        "contact_numbers": ["15550000001", "", "15550000002"],
    }
    data.update(kwargs)
    return EventCreateSchema.model_validate(data)


def test_create_event(next_week: datetime) -> None:
    event = event_service.create_event(_create_payload(next_week))

    assert event.title == "Spring Book Swap"
    assert event.status == Event.EventStatus.UPCOMING
    assert [t.name for t in Ticket.objects.for_event(event)] == ["Standard", "Supporter"]
    assert list(event.contact_channels.values_list("phone_number", flat=True)) == ["15550000001", "15550000002"]
    (field,) = event.form_schema
    assert field.label == "Dietary"
    assert field.required is True
    assert field.id


def test_create_without_tickets(next_week: datetime) -> None:
    event = event_service.create_event(_create_payload(next_week, tickets=None, contact_numbers=None))

    assert not event.tickets.exists()
    assert not event.contact_channels.exists()


def test_create_schema_rejects_inverted_window(next_week: datetime) -> None:
    with pytest.raises(ValueError, match="registration_end_date must be after"):
        _create_payload(
            next_week,
            registration_start_date=next_week,
            registration_end_date=next_week - timedelta(hours=1),
        )


def test_create_schema_rejects_duplicate_labels(next_week: datetime) -> None:
    with pytest.raises(ValueError, match="Duplicate field label"):
        _create_payload(next_week, form_fields=[{"label": "Dietary"}, {"label": "Dietary"}])


def test_model_rejects_inverted_window(next_week: datetime) -> None:
    with pytest.raises(ValidationError) as exc_info:
        Event.objects.create(
            title="Bad",
            event_date=next_week,
            registration_start_date=next_week,
            registration_end_date=next_week,
        )

    assert "registration_end_date" in exc_info.value.message_dict


def test_update_only_touches_given_fields(event: Event, ticket: Ticket) -> None:
    payload = EventEditSchema.model_validate({"status": "closed", "location": "Library"})

    updated = event_service.update_event(event, payload)

    assert updated.status == Event.EventStatus.CLOSED
    assert updated.location == "Library"
    assert updated.title == "Book Club"
    assert list(updated.tickets.all()) == [ticket]


def test_update_replaces_tickets_and_contacts(event: Event, ticket: Ticket, member: ClubUser) -> None:
    ContactChannel.objects.create(event=event, phone_number="111")
    Registration.objects.create(user=member, event=event, ticket=ticket, ticket_name=ticket.name)
    payload = EventEditSchema.model_validate(
        {"tickets": [{"name": "Late bird"}], "contact_numbers": ["222"], "form_fields": [{"label": "Pages read"}]}
    )

    updated = event_service.update_event(event, payload)

    assert [t.name for t in updated.tickets.all()] == ["Late bird"]
    assert [c.phone_number for c in updated.contact_channels.all()] == ["222"]
    assert [f.label for f in updated.form_schema] == ["Pages read"]
    assert Registration.objects.filter(event=event).count() == 1


def test_update_can_clear_the_form(dietary_event: Event) -> None:
    updated = event_service.update_event(dietary_event, EventEditSchema.model_validate({"form_fields": None}))

    assert updated.form_schema == []


def test_delete_event_removes_everything(event: Event, ticket: Ticket, member: ClubUser) -> None:
    ContactChannel.objects.create(event=event, phone_number="111")
    Registration.objects.create(user=member, event=event, ticket=ticket)

    event_service.delete_event(event)

    assert not Event.objects.filter(pk=event.pk).exists()
    assert not Ticket.objects.filter(event_id=event.pk).exists()
    assert not ContactChannel.objects.filter(event_id=event.pk).exists()
    assert not Registration.objects.filter(event_id=event.pk).exists()
    assert ClubUser.objects.filter(pk=member.pk).exists()


def test_public_list_is_chronological(next_week: datetime) -> None:
    later = Event.objects.create(title="Later", event_date=next_week + timedelta(days=3))
    sooner = Event.objects.create(title="Sooner", event_date=next_week)
    past = Event.objects.create(
        title="Past", event_date=timezone.now() - timedelta(days=3), status=Event.EventStatus.COMPLETED
    )

    assert list(event_service.list_public_events()) == [past, sooner, later]


def test_dashboard_stats(event: Event, closed_event: Event, member: ClubUser, club_admin: ClubUser) -> None:
    closed_event.status = Event.EventStatus.CLOSED
    closed_event.save()
    Registration.objects.create(user=member, event=event)

    stats = event_service.dashboard_stats()

    assert stats.total_users == 2
    assert stats.total_events == 2
    assert stats.upcoming_events == 1
    assert stats.total_registrations == 1
