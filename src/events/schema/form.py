"""Registration form field definitions."""

import typing as t
import uuid
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator, model_validator


class FormFieldType(StrEnum):
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    SELECT = "select"
    CHECKBOX = "checkbox"


def _new_field_id() -> str:
    return uuid.uuid4().hex[:12]


class FormField(BaseModel):
    """One administrator-defined question of an event's registration form."""

    model_config = ConfigDict(extra="ignore", use_enum_values=False)

    id: t.Annotated[str, StringConstraints(min_length=1, max_length=64, strip_whitespace=True)] = Field(
        default_factory=_new_field_id, description="Opaque token, unique within the event"
    )
    label: t.Annotated[str, StringConstraints(min_length=1, max_length=255, strip_whitespace=True)]
    type: FormFieldType = FormFieldType.TEXT
    required: bool = False
    options: list[str] | None = Field(None, description="Allowed values, only for `select` fields")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: t.Any) -> t.Any:
        """Accept numeric ids, which older form definitions used."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def check_options(self) -> t.Self:
        """Select fields need at least one option; other kinds carry none."""
        if self.type != FormFieldType.SELECT:
            self.options = None
            return self
        options = [option.strip() for option in self.options or [] if option and option.strip()]
        if not options:
            raise ValueError(f"Select field '{self.label}' needs at least one option.")
        self.options = list(dict.fromkeys(options))
        return self
