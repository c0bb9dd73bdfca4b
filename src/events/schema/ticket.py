"""Ticket schemas."""

from decimal import Decimal
from uuid import UUID

from ninja import Schema
from pydantic import Field

from common.schema import OneToTwoFiftyFiveString
from events.models import DEFAULT_TICKET_NAME


class TicketInSchema(Schema):
    name: OneToTwoFiftyFiveString = DEFAULT_TICKET_NAME
    price: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    quantity: int = Field(100, ge=0, description="Advisory; never decremented by registrations")


class TicketSchema(Schema):
    id: UUID
    name: str
    price: Decimal
    quantity: int


class TicketReplaceSchema(Schema):
    tickets: list[TicketInSchema]
