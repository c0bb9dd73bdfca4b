from datetime import datetime

import pytest
from django.core.exceptions import ValidationError

from accounts import schema
from accounts.exceptions import ConflictError
from accounts.models import ClubUser
from accounts.service import account as account_service
from events.models import Event, Registration

pytestmark = pytest.mark.django_db

STRONG_PASSWORD = "a-Strong-password-123!"  # noqa: S105


def _register_payload(**kwargs: object) -> schema.RegisterUserSchema:
    data: dict[str, object] = {
        "email": "newreader@example.com",
        "password1": STRONG_PASSWORD,
        "password2": STRONG_PASSWORD,
        "name": "New Reader",
    }
    data.update(kwargs)
    return schema.RegisterUserSchema.model_validate(data)


def test_register_user() -> None:
    user = account_service.register_user(_register_payload(phone_number="+1 555 123 4567"))

    assert user.email == "newreader@example.com"
    assert user.check_password(STRONG_PASSWORD)
    assert user.role == ClubUser.Role.MEMBER
    assert user.phone_number == "+15551234567"


def test_register_duplicate_email_is_case_insensitive(member: ClubUser) -> None:
    with pytest.raises(ConflictError, match="Email already exists"):
        account_service.register_user(_register_payload(email="MEMBER@example.com"))


def test_register_rejects_weak_password() -> None:
    with pytest.raises(ValidationError):
        account_service.register_user(_register_payload(password1="password", password2="password"))

    assert not ClubUser.objects.exists()


def test_mismatched_passwords_fail_validation() -> None:
    with pytest.raises(ValueError, match="Passwords do not match"):
        _register_payload(password2="something-else-123!")


def test_create_admin_user() -> None:
    payload = schema.UserCreateSchema(email="boss@example.com", password=STRONG_PASSWORD, role="admin")

    user = account_service.create_user(payload)

    assert user.is_staff is True
    assert user.check_password(STRONG_PASSWORD)


def test_update_user(member: ClubUser) -> None:
    payload = schema.UserUpdateSchema.model_validate({"name": "Renamed", "status": "inactive"})

    user = account_service.update_user(member, payload)

    assert user.name == "Renamed"
    assert user.is_active is False
    assert user.email == "member@example.com"


def test_update_user_email_conflict(member: ClubUser, club_admin: ClubUser) -> None:
    with pytest.raises(ConflictError):
        account_service.update_user(member, schema.UserUpdateSchema(email=club_admin.email))


def test_delete_user_removes_registrations(member: ClubUser, next_week: datetime) -> None:
    event = Event.objects.create(title="Book Club", event_date=next_week)
    Registration.objects.create(user=member, event=event)

    account_service.delete_user(member)

    assert not ClubUser.objects.filter(pk=member.pk).exists()
    assert not Registration.objects.exists()
