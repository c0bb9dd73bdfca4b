"""Types and exceptions for the registration gate."""

import datetime
import uuid

from pydantic import BaseModel


class RegistrationEligibility(BaseModel):
    """Result of a registration gate check for an event."""

    allowed: bool
    event_id: uuid.UUID
    reason: str | None = None  # not the enum, so that it can be translated
    status: str | None = None
    opens_at: datetime.datetime | None = None
    closes_at: datetime.datetime | None = None


class RegistrationClosedError(Exception):
    """Raised when an event does not accept registrations right now."""

    def __init__(self, message: str, eligibility: RegistrationEligibility) -> None:
        """Initialize the exception with the gate result."""
        super().__init__(message)
        self.eligibility = eligibility
