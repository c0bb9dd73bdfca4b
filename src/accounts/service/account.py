"""Service layer for club accounts: self sign-up and administrator user management."""

import structlog
from django.contrib.auth.password_validation import validate_password
from django.db import IntegrityError, transaction
from django.utils.translation import gettext_lazy as _

from accounts import schema
from accounts.exceptions import ConflictError
from accounts.models import ClubUser

logger = structlog.get_logger(__name__)


def _ensure_email_available(email: str, *, exclude: ClubUser | None = None) -> None:
    qs = ClubUser.objects.filter(email__iexact=email)
    if exclude is not None:
        qs = qs.exclude(pk=exclude.pk)
    if qs.exists():
        logger.warning("user_email_conflict", email=email)
        raise ConflictError(str(_("Email already exists")))


@transaction.atomic
def register_user(payload: schema.RegisterUserSchema) -> ClubUser:
    """Register a new member.

    Raises:
        ConflictError: If the email is already registered.
    """
    logger.info("user_registration_started", email=payload.email)
    _ensure_email_available(payload.email)
    validate_password(payload.password1, user=ClubUser(email=payload.email, name=payload.name))
    try:
        new_user = ClubUser.objects.create_user(
            username=payload.email.lower(),
            email=payload.email,
            password=payload.password1,
            name=payload.name,
            phone_number=payload.phone_number or None,
        )
    except IntegrityError as e:
        # Lost a race against a concurrent sign-up with the same email
        raise ConflictError(str(_("Email already exists"))) from e
    logger.info("user_registration_completed", user_id=str(new_user.id), email=new_user.email)
    return new_user


@transaction.atomic
def create_user(payload: schema.UserCreateSchema) -> ClubUser:
    """Create a user on behalf of an administrator."""
    _ensure_email_available(payload.email)
    user = ClubUser(
        username=payload.email.lower(),
        email=payload.email,
        name=payload.name,
        phone_number=payload.phone_number or None,
    )
    user.role = payload.role
    user.status = payload.status
    user.set_password(payload.password)
    user.full_clean(exclude=["password"])
    user.save()
    logger.info("user_created_by_admin", user_id=str(user.id), role=str(user.role))
    return user


@transaction.atomic
def update_user(user: ClubUser, payload: schema.UserUpdateSchema) -> ClubUser:
    """Apply an administrator's edits to a user."""
    user = ClubUser.objects.select_for_update().get(pk=user.pk)
    data = payload.model_dump(exclude_unset=True)
    if (email := data.pop("email", None)) is not None:
        _ensure_email_available(email, exclude=user)
        user.email = email
    if (password := data.pop("password", None)) is not None:
        user.set_password(password)
    for key, value in data.items():
        if key in ("role", "status") and value is None:
            continue
        setattr(user, key, value)
    user.full_clean(exclude=["password", "username"])
    user.save()
    logger.info("user_updated_by_admin", user_id=str(user.id), fields=sorted(payload.model_fields_set))
    return user


@transaction.atomic
def delete_user(user: ClubUser) -> None:
    """Delete a user together with their registrations."""
    user_id = str(user.id)
    user.delete()
    logger.info("user_deleted_by_admin", user_id=user_id)
