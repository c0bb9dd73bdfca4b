"""Registration gate package.

Decides whether an event currently accepts registrations: the event must be upcoming
and the current time must fall inside its registration window.
"""

from .enums import Reasons
from .service import RegistrationGateService
from .types import RegistrationClosedError, RegistrationEligibility

__all__ = [
    "Reasons",
    "RegistrationClosedError",
    "RegistrationEligibility",
    "RegistrationGateService",
]
