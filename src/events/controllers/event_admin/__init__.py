"""Event admin controllers package.

Splits the administrator endpoints into logical groupings.
"""

from .core import EventAdminCoreController
from .registrations import EventAdminRegistrationsController
from .tickets import EventAdminTicketsController

EVENT_ADMIN_CONTROLLERS: list[type] = [
    EventAdminCoreController,
    EventAdminTicketsController,
    EventAdminRegistrationsController,
]

__all__ = [
    "EventAdminCoreController",
    "EventAdminRegistrationsController",
    "EventAdminTicketsController",
    "EVENT_ADMIN_CONTROLLERS",
]
