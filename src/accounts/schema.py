"""Schema for accounts module."""

import typing as t

from ninja import Schema
from ninja_jwt.schema import TokenObtainPairOutputSchema
from pydantic import UUID4, EmailStr, Field, model_validator

from common.schema import StrippedString

from .models import ClubUser


class ClubUserSchema(Schema):
    id: UUID4
    email: str
    name: str
    phone_number: str | None = None
    role: ClubUser.Role
    status: ClubUser.Status
    display_name: str


class PasswordMixin(Schema):
    password1: str = Field(..., description="Password", min_length=8, max_length=150)
    password2: str = Field(..., description="Password confirmation", min_length=8, max_length=150)

    @model_validator(mode="after")
    def password_match(self) -> t.Self:
        """Validate that the passwords match."""
        if self.password1 != self.password2:
            raise ValueError("Passwords do not match")
        return self


class RegisterUserSchema(PasswordMixin):
    email: EmailStr
    name: StrippedString = Field("", max_length=255)
    phone_number: StrippedString | None = Field(None, max_length=20)


class RegisterResponseSchema(Schema):
    user: ClubUserSchema
    token: TokenObtainPairOutputSchema


class UserCreateSchema(Schema):
    """Admin payload for creating a user."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=150)
    name: StrippedString = Field("", max_length=255)
    phone_number: StrippedString | None = Field(None, max_length=20)
    role: ClubUser.Role = ClubUser.Role.MEMBER
    status: ClubUser.Status = ClubUser.Status.ACTIVE


class UserUpdateSchema(Schema):
    """Admin payload for editing a user. Omitted fields are left untouched."""

    email: EmailStr | None = None
    name: StrippedString | None = Field(None, max_length=255)
    phone_number: StrippedString | None = Field(None, max_length=20)
    role: ClubUser.Role | None = None
    status: ClubUser.Status | None = None
    password: str | None = Field(None, min_length=8, max_length=150)
