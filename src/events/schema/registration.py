"""Registration schemas."""

import typing as t
from datetime import datetime
from uuid import UUID

from ninja import Schema
from pydantic import Field

from events.models import Registration


class RegistrationCreateSchema(Schema):
    event_id: UUID
    ticket_id: UUID | None = None
    user_id: UUID | None = Field(None, description="Register someone else; administrators only")
    form_responses: dict[str, t.Any] = Field(
        default_factory=dict, description="Answers keyed by field id (field labels are accepted as well)"
    )


class RegistrationResultSchema(Schema):
    registration_id: UUID
    whatsapp_url: str


class RegistrationAdminSchema(Schema):
    id: UUID
    user_id: UUID
    user_name: str
    user_email: str
    ticket_id: UUID | None = None
    ticket_name: str
    form_responses: dict[str, str | bool]
    created_at: datetime

    @staticmethod
    def resolve_user_name(obj: Registration) -> str:
        return obj.user.display_name

    @staticmethod
    def resolve_user_email(obj: Registration) -> str:
        return obj.user.email

    @staticmethod
    def resolve_form_responses(obj: Registration) -> dict[str, str | bool]:
        return obj.answers
