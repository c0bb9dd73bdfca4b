"""Ticket inventory: per-event ticket types, replaced as a whole on every edit."""

import typing as t
from collections.abc import Iterable

import structlog
from django.db import transaction
from django.db.models import QuerySet

from events.models import Event, Ticket
from events.schema import TicketInSchema

logger = structlog.get_logger(__name__)


def list_tickets(event: Event) -> QuerySet[Ticket]:
    """The event's tickets in the order they were given."""
    return Ticket.objects.for_event(event)


@transaction.atomic
def replace_tickets(event: Event, tickets: Iterable[TicketInSchema | t.Mapping[str, t.Any]]) -> list[Ticket]:
    """Delete every ticket of the event and insert the given ones, in order.

    Both steps run in one transaction, so readers never observe a partial set. Registrations
    pointing at removed tickets keep their ``ticket_name`` snapshot and lose the link.
    """
    # Serialize concurrent replacements of the same event
    list(Event.objects.select_for_update().filter(pk=event.pk).values_list("pk", flat=True))
    new_tickets: list[Ticket] = []
    for position, ticket in enumerate(tickets):
        data = ticket.model_dump() if isinstance(ticket, TicketInSchema) else dict(ticket)
        instance = Ticket(event=event, position=position, **data)
        instance.full_clean()
        new_tickets.append(instance)

    deleted = Ticket.objects.filter(event=event).delete()[0]
    created = Ticket.objects.bulk_create(new_tickets)
    logger.info("tickets_replaced", event_id=str(event.pk), removed=deleted, added=len(created))
    return created
