"""Common schemas for the API."""

import typing as t

from ninja import Schema
from pydantic import StringConstraints

StrippedString = t.Annotated[str, StringConstraints(strip_whitespace=True)]
OneToTwoFiftyFiveString = t.Annotated[str, StringConstraints(min_length=1, max_length=255, strip_whitespace=True)]


class VersionResponse(Schema):
    version: str


class ResponseOk(Schema):
    status: t.Literal["ok"] = "ok"


class ValidationErrorResponse(Schema):
    errors: dict[str, str | list[str]]


class SiteSettingsSchema(Schema):
    """Flat key-value mapping of the site configuration."""

    settings: dict[str, str]


class SiteSettingsUpdateSchema(Schema):
    settings: dict[str, str | int | float | bool | None]
