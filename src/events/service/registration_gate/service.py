"""RegistrationGateService: runs the registration gates for an event."""

import datetime

import structlog
from django.utils import timezone

from events.models import Event

from .gates import REGISTRATION_GATES, BaseRegistrationGate
from .types import RegistrationClosedError, RegistrationEligibility

logger = structlog.get_logger(__name__)


class RegistrationGateService:
    """Evaluates the registration gates in order; the first denial wins."""

    def __init__(self, event: Event, now: datetime.datetime | None = None) -> None:
        """Bind the event and the instant the check refers to (defaults to now)."""
        self.event = event
        self.now = now or timezone.now()
        self._gates: list[BaseRegistrationGate] = [gate(self) for gate in REGISTRATION_GATES]

    def check(self) -> RegistrationEligibility:
        """Check whether the event accepts registrations."""
        for gate in self._gates:
            if result := gate.check():
                return result
        return RegistrationEligibility(
            allowed=True,
            event_id=self.event.pk,
            status=self.event.status,
            opens_at=self.event.registration_start_date,
            closes_at=self.event.registration_end_date,
        )

    def assert_open(self) -> RegistrationEligibility:
        """Like check(), but raises when registrations are not accepted.

        Raises:
            RegistrationClosedError: carrying the denial.
        """
        eligibility = self.check()
        if not eligibility.allowed:
            logger.info("registration_gate_denied", event_id=str(self.event.pk), reason=eligibility.reason)
            raise RegistrationClosedError(eligibility.reason or "Registration is closed.", eligibility)
        return eligibility
