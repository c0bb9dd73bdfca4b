"""JWT authentication classes for the Lumina API."""

import typing as t

import structlog
from django.contrib.auth.models import AnonymousUser
from django.http import HttpRequest
from django.utils.translation import gettext_lazy as _
from ninja_extra import status
from ninja_extra.exceptions import APIException
from ninja_jwt.authentication import JWTAuth


class PermissionDenied(APIException):
    """Exception raised when user doesn't have required permissions."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = _("Permission denied")


class BaseJWTAuth(JWTAuth):
    """JWT authentication with an optional staff requirement.

    Club administrators are Django staff users, so admin-only endpoints are
    guarded with ``BaseJWTAuth(is_staff=True)``.
    """

    def __init__(self, *, is_staff: bool = False) -> None:
        """Initialize the authentication class.

        Args:
            is_staff: Whether the user must be a club administrator.
        """
        self.is_staff = is_staff
        super().__init__()

    def authenticate(self, request: HttpRequest, token: str) -> t.Any:
        """Authenticate and verify the administrator requirement.

        Raises:
            PermissionDenied: If the endpoint is admin-only and the user is a regular member.
        """
        user = super().authenticate(request, token)

        if user and not isinstance(user, AnonymousUser):
            structlog.contextvars.bind_contextvars(user_id=str(user.pk))
            if self.is_staff and not getattr(user, "is_staff", False):
                raise PermissionDenied(str(_("Admin access required.")))

        return user


class AdminJWTAuth(BaseJWTAuth):
    """Shortcut for ``BaseJWTAuth(is_staff=True)``."""

    def __init__(self) -> None:
        """Require an administrator."""
        super().__init__(is_staff=True)
