"""Event lifecycle: create, edit and delete events together with their tickets and contact channels."""

import typing as t
from collections.abc import Iterable

import structlog
from django.db import transaction
from django.db.models import QuerySet

from accounts.models import ClubUser
from events import schema
from events.models import ContactChannel, Event, Registration, Ticket
from events.service import ticket_service, update_db_instance
from events.service.form_schema import dump_form_fields

logger = structlog.get_logger(__name__)

# Sets replaced as a whole rather than assigned as fields
_REPLACED_SETS = {"tickets", "contact_numbers"}


def list_public_events() -> QuerySet[Event]:
    """All events, earliest first, with tickets prefetched."""
    return Event.objects.all().with_tickets().chronological()


def list_events_for_admin() -> QuerySet[Event]:
    """All events with tickets, registrations (and registrants) and contact channels."""
    return Event.objects.with_admin_details().chronological()


def replace_contact_channels(event: Event, numbers: Iterable[str]) -> list[ContactChannel]:
    """Replace the event's additional contact numbers, keeping the given order and dropping blanks."""
    ContactChannel.objects.filter(event=event).delete()
    channels = [
        ContactChannel(event=event, phone_number=number, position=position)
        for position, number in enumerate(n for n in numbers if n)
    ]
    return ContactChannel.objects.bulk_create(channels)


@transaction.atomic
def create_event(payload: schema.EventCreateSchema) -> Event:
    """Create an event with its tickets and contact numbers in one transaction."""
    data = payload.model_dump(exclude=_REPLACED_SETS | {"form_fields"})
    event = Event(**data, form_fields=dump_form_fields(payload.form_fields))
    event.save()
    if payload.tickets is not None:
        ticket_service.replace_tickets(event, payload.tickets)
    if payload.contact_numbers is not None:
        replace_contact_channels(event, payload.contact_numbers)
    logger.info(
        "event_created",
        event_id=str(event.pk),
        tickets=len(payload.tickets or []),
        form_fields=len(payload.form_fields),
    )
    return event


@transaction.atomic
def update_event(event: Event, payload: schema.EventEditSchema) -> Event:
    """Apply an edit in place.

    Only the fields present in the payload change. A given ticket list or contact list replaces the
    current one; registrations are never touched.
    """
    extra: dict[str, t.Any] = {}
    if "form_fields" in payload.model_fields_set:
        extra["form_fields"] = dump_form_fields(payload.form_fields or [])
    event = update_db_instance(event, payload, exclude=_REPLACED_SETS | {"form_fields"}, **extra)
    if payload.tickets is not None:
        ticket_service.replace_tickets(event, payload.tickets)
    if payload.contact_numbers is not None:
        replace_contact_channels(event, payload.contact_numbers)
    logger.info("event_updated", event_id=str(event.pk), fields=sorted(payload.model_fields_set))
    return event


@transaction.atomic
def delete_event(event: Event) -> None:
    """Delete an event and everything attached to it.

    Registrations go first, then tickets, then contact channels, then the event itself; the
    whole sequence commits or rolls back together.
    """
    event_id = str(event.pk)
    registrations = Registration.objects.filter(event_id=event.pk).delete()[0]
    tickets = Ticket.objects.filter(event_id=event.pk).delete()[0]
    contacts = ContactChannel.objects.filter(event_id=event.pk).delete()[0]
    Event.objects.filter(pk=event.pk).delete()
    logger.info(
        "event_deleted", event_id=event_id, registrations=registrations, tickets=tickets, contacts=contacts
    )


def dashboard_stats() -> schema.DashboardStatsSchema:
    """Headline counts for the admin dashboard."""
    return schema.DashboardStatsSchema(
        total_users=ClubUser.objects.count(),
        total_events=Event.objects.count(),
        upcoming_events=Event.objects.upcoming().count(),
        total_registrations=Registration.objects.count(),
    )
