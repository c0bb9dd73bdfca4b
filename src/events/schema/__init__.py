from .event import DashboardStatsSchema, EventAdminSchema, EventCreateSchema, EventEditSchema, EventSchema
from .form import FormField, FormFieldType
from .registration import RegistrationAdminSchema, RegistrationCreateSchema, RegistrationResultSchema
from .ticket import TicketInSchema, TicketReplaceSchema, TicketSchema

__all__ = [
    "DashboardStatsSchema",
    "EventAdminSchema",
    "EventCreateSchema",
    "EventEditSchema",
    "EventSchema",
    "FormField",
    "FormFieldType",
    "RegistrationAdminSchema",
    "RegistrationCreateSchema",
    "RegistrationResultSchema",
    "TicketInSchema",
    "TicketReplaceSchema",
    "TicketSchema",
]
