import re
import typing as t
import uuid

from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models

from accounts.validators import normalize_phone_number, validate_phone_number


class ClubUserQueryset(models.QuerySet["ClubUser"]):
    """Queryset for ClubUser."""

    def admins(self) -> t.Self:
        """Club administrators."""
        return self.filter(is_staff=True)

    def members(self) -> t.Self:
        """Regular members."""
        return self.filter(is_staff=False)


class ClubUserManager(UserManager["ClubUser"]):
    def get_queryset(self) -> ClubUserQueryset:
        """Get queryset for ClubUser."""
        return ClubUserQueryset(self.model, using=self._db)

    def admins(self) -> ClubUserQueryset:
        """Club administrators."""
        return self.get_queryset().admins()

    def members(self) -> ClubUserQueryset:
        """Regular members."""
        return self.get_queryset().members()


class ClubUser(AbstractUser):
    """A club member or administrator.

    The email address doubles as the username. ``role`` and ``status`` are the
    club-facing names for Django's ``is_staff`` and ``is_active`` flags.
    """

    class Role(models.TextChoices):
        MEMBER = "member"
        ADMIN = "admin"

    class Status(models.TextChoices):
        ACTIVE = "active"
        INACTIVE = "inactive"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    name = models.CharField(db_index=True, max_length=255, blank=True, help_text="Display name")
    phone_number = models.CharField(
        max_length=20, null=True, blank=True, validators=[validate_phone_number], help_text="Phone number"
    )

    objects = ClubUserManager()  # type: ignore[misc]

    class Meta:
        ordering = ["-date_joined"]

    def save(self, *args: t.Any, **kwargs: t.Any) -> None:
        """Normalize phone number and keep the username in sync with the email."""
        if self.phone_number:
            self.phone_number = normalize_phone_number(self.phone_number)
        if self.email:
            self.email = self.email.lower()
            self.username = self.email
        super().save(*args, **kwargs)

    @property
    def role(self) -> str:
        return self.Role.ADMIN if self.is_staff else self.Role.MEMBER

    @role.setter
    def role(self, value: str) -> None:
        self.is_staff = value == self.Role.ADMIN

    @property
    def status(self) -> str:
        return self.Status.ACTIVE if self.is_active else self.Status.INACTIVE

    @status.setter
    def status(self, value: str) -> None:
        self.is_active = value == self.Status.ACTIVE

    @property
    def display_name(self) -> str:
        """Display name."""
        return self.get_display_name()

    def get_display_name(self) -> str:
        """Returns the user's name, or a name derived from the email as a fallback."""
        return self.name or self.get_full_name() or re.sub(r"(\W|_)+", " ", self.email.split("@")[0]).title()
