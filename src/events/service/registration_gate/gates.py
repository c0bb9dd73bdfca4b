"""Composable checks deciding whether an event accepts registrations."""

import abc
import typing as t

from django.utils.translation import gettext as _

from events.models import Event

from .enums import Reasons
from .types import RegistrationEligibility

if t.TYPE_CHECKING:
    from .service import RegistrationGateService


class BaseRegistrationGate(abc.ABC):
    """Abstract Base Class for a composable registration check."""

    def __init__(self, handler: "RegistrationGateService") -> None:
        """Initialize the check."""
        self.handler = handler
        self.event = handler.event
        self.now = handler.now

    def closed(self, reason: Reasons) -> RegistrationEligibility:
        return RegistrationEligibility(
            allowed=False,
            event_id=self.event.pk,
            reason=_(reason),
            status=self.event.status,
            opens_at=self.event.registration_start_date,
            closes_at=self.event.registration_end_date,
        )

    @abc.abstractmethod
    def check(self) -> RegistrationEligibility | None:
        """Return a denial, or None to let the next gate decide."""


class EventStatusGate(BaseRegistrationGate):
    """Gate #1: only upcoming events take registrations."""

    def check(self) -> RegistrationEligibility | None:
        """Check the event status."""
        if self.event.status != Event.EventStatus.UPCOMING:
            return self.closed(Reasons.EVENT_NOT_UPCOMING)
        return None


class RegistrationWindowGate(BaseRegistrationGate):
    """Gate #2: the current time must be within [registration_start_date, registration_end_date).

    Each bound is optional and applies on its own.
    """

    def check(self) -> RegistrationEligibility | None:
        """Check the registration window."""
        start, end = self.event.registration_start_date, self.event.registration_end_date
        if start is not None and self.now < start:
            return self.closed(Reasons.REGISTRATION_NOT_OPEN_YET)
        if end is not None and self.now >= end:
            return self.closed(Reasons.REGISTRATION_CLOSED)
        return None


REGISTRATION_GATES: list[type[BaseRegistrationGate]] = [
    EventStatusGate,
    RegistrationWindowGate,
]
