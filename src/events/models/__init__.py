from .event import ContactChannel, Event
from .registration import Registration
from .ticket import DEFAULT_TICKET_NAME, Ticket

__all__ = [
    "DEFAULT_TICKET_NAME",
    "ContactChannel",
    "Event",
    "Registration",
    "Ticket",
]
