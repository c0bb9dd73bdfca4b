"""Registration ledger: records validated registrations and hands off to the event's contact channel."""

import typing as t
from uuid import UUID

import structlog
from django.db import DatabaseError, transaction
from django.db.models import QuerySet

from accounts.models import ClubUser
from events.exceptions import NotFoundError, PersistenceError
from events.models import Event, Registration, Ticket
from events.schema import RegistrationResultSchema
from events.service.contact_handoff import build_whatsapp_url
from events.service.form_schema import validate_answers
from events.service.registration_gate import RegistrationGateService

logger = structlog.get_logger(__name__)


def register(
    *,
    user_id: UUID,
    event_id: UUID,
    ticket_id: UUID | None = None,
    answers: t.Mapping[str, t.Any] | None = None,
) -> RegistrationResultSchema:
    """Register a user for an event.

    The event must exist and accept registrations, the ticket (when given) must belong to the
    event, and the answers must satisfy the event's current form. Nothing is written unless all
    of these hold. The same user may register more than once.

    Raises:
        NotFoundError: unknown event, user, or ticket.
        RegistrationClosedError: the event is not upcoming or outside its registration window.
        ValidationFailed: the answers violate the form.
        PersistenceError: the write failed.
    """
    event = Event.objects.filter(pk=event_id).first()
    if event is None:
        raise NotFoundError("Event not found.")
    user = ClubUser.objects.filter(pk=user_id).first()
    if user is None:
        raise NotFoundError("User not found.")

    RegistrationGateService(event).assert_open()

    ticket: Ticket | None = None
    if ticket_id is not None:
        ticket = Ticket.objects.filter(pk=ticket_id, event=event).first()
        if ticket is None:
            raise NotFoundError("Ticket not found for this event.")

    form_responses = validate_answers(event.form_schema, answers)

    try:
        with transaction.atomic():
            registration = Registration.objects.create(
                user=user,
                event=event,
                ticket=ticket,
                ticket_name=ticket.name if ticket else "",
                form_responses=form_responses,
            )
    except DatabaseError as e:
        logger.exception("registration_persist_failed", event_id=str(event.pk), user_id=str(user.pk))
        raise PersistenceError("Could not save the registration.") from e

    logger.info(
        "registration_created",
        registration_id=str(registration.pk),
        event_id=str(event.pk),
        user_id=str(user.pk),
        ticket_id=str(ticket.pk) if ticket else None,
    )
    return RegistrationResultSchema(
        registration_id=registration.pk,
        whatsapp_url=build_whatsapp_url(event.whatsapp_number, event.title),
    )


def list_registrations(event: Event) -> QuerySet[Registration]:
    """The event's registrations, newest first, with the registrant selected."""
    return Registration.objects.with_user().filter(event=event).order_by("-created_at")


def deregister(registration_id: UUID) -> bool:
    """Delete a registration. Deleting one that does not exist is a no-op.

    Returns:
        Whether a registration was removed.
    """
    deleted = Registration.objects.filter(pk=registration_id).delete()[0]
    logger.info("registration_deleted", registration_id=str(registration_id), deleted=bool(deleted))
    return bool(deleted)
