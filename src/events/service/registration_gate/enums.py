"""Enums for the registration gate."""

from enum import StrEnum

from django.utils.translation import gettext_noop


class Reasons(StrEnum):
    """Reasons why an event does not accept registrations.

    Strings are marked with _noop() for extraction and translated in gates.py.
    """

    EVENT_NOT_UPCOMING = gettext_noop("Event is not open for registration.")
    REGISTRATION_NOT_OPEN_YET = gettext_noop("Registration has not opened yet.")
    REGISTRATION_CLOSED = gettext_noop("Registration has closed.")
