"""Event-related schemas."""

import typing as t
from datetime import datetime
from uuid import UUID

from ninja import Schema
from pydantic import AwareDatetime, Field, model_validator

from common.schema import OneToTwoFiftyFiveString, StrippedString
from events.exceptions import FormSchemaError
from events.models import Event
from events.service.registration_gate import RegistrationGateService

from .form import FormField
from .registration import RegistrationAdminSchema
from .ticket import TicketInSchema, TicketSchema


def _check_form_fields(fields: list[FormField] | None) -> None:
    from events.service.form_schema import check_unique_fields

    if fields:
        # pydantic only reports ValueError and AssertionError as validation errors
        try:
            check_unique_fields(fields)
        except FormSchemaError as e:
            raise ValueError("; ".join(e.messages)) from e


def _check_window(start: datetime | None, end: datetime | None) -> None:
    if start and end and end <= start:
        raise ValueError("registration_end_date must be after registration_start_date")


class EventEditSchema(Schema):
    """Edit payload. Omitted fields are left untouched; ``tickets`` and ``contact_numbers`` replace the
    existing sets when present.
    """

    title: OneToTwoFiftyFiveString | None = None
    description: StrippedString | None = None
    event_date: AwareDatetime | None = None
    location: StrippedString | None = Field(None, max_length=255)
    event_type: Event.EventType | None = None
    status: Event.EventStatus | None = None
    whatsapp_number: StrippedString | None = Field(None, max_length=32)
    form_fields: list[FormField] | None = None
    registration_start_date: AwareDatetime | None = None
    registration_end_date: AwareDatetime | None = None
    tickets: list[TicketInSchema] | None = None
    contact_numbers: list[StrippedString] | None = None

    @model_validator(mode="after")
    def validate_event(self) -> t.Self:
        """Check form field uniqueness and the registration window."""
        _check_form_fields(self.form_fields)
        _check_window(self.registration_start_date, self.registration_end_date)
        return self


class EventCreateSchema(EventEditSchema):
    title: OneToTwoFiftyFiveString
    description: StrippedString = ""
    event_date: AwareDatetime
    location: StrippedString = Field("", max_length=255)
    event_type: Event.EventType = Event.EventType.PHYSICAL
    status: Event.EventStatus = Event.EventStatus.UPCOMING
    whatsapp_number: StrippedString = Field("", max_length=32)
    form_fields: list[FormField] = Field(default_factory=list)


class EventSchema(Schema):
    id: UUID
    title: str
    description: str
    event_date: datetime
    location: str
    event_type: Event.EventType
    status: Event.EventStatus
    whatsapp_number: str
    form_fields: list[FormField]
    registration_start_date: datetime | None = None
    registration_end_date: datetime | None = None
    registration_open: bool
    tickets: list[TicketSchema]

    @staticmethod
    def resolve_form_fields(obj: Event) -> list[FormField]:
        return obj.form_schema

    @staticmethod
    def resolve_registration_open(obj: Event) -> bool:
        return RegistrationGateService(obj).check().allowed

    @staticmethod
    def resolve_tickets(obj: Event) -> list[t.Any]:
        return list(obj.tickets.all())


class EventAdminSchema(EventSchema):
    contact_numbers: list[str]
    registrations: list[RegistrationAdminSchema]
    registration_count: int
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def resolve_contact_numbers(obj: Event) -> list[str]:
        return [channel.phone_number for channel in obj.contact_channels.all()]

    @staticmethod
    def resolve_registrations(obj: Event) -> list[t.Any]:
        return list(obj.registrations.all())

    @staticmethod
    def resolve_registration_count(obj: Event) -> int:
        return len(obj.registrations.all())


class DashboardStatsSchema(Schema):
    total_users: int
    total_events: int
    upcoming_events: int
    total_registrations: int
