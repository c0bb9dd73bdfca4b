"""Shared fixtures for the Lumina test suite."""

import typing as t
from datetime import datetime, time, timedelta

import faker
import pytest
from django.core.cache import cache
from django.test.client import Client
from django.utils import timezone
from ninja_jwt.tokens import RefreshToken

from accounts.models import ClubUser

STRONG_PASSWORD = "a-Strong-password-123!"  # noqa: S105


@pytest.fixture(autouse=True)
def clear_throttle_cache() -> t.Iterator[None]:
    """Throttle history lives in the cache; start every test with a clean slate."""
    cache.clear()
    yield
    cache.clear()


class ClubUserFactory:
    """Factory for creating ClubUser instances for testing."""

    fake = faker.Faker()

    def create_user(self, **kwargs: t.Any) -> ClubUser:
        email = kwargs.pop("email", self.fake.unique.email())
        password = kwargs.pop("password", STRONG_PASSWORD)
        name = kwargs.pop("name", self.fake.name())
        return ClubUser.objects.create_user(username=email, email=email, password=password, name=name, **kwargs)

    def __call__(self, **kwargs: t.Any) -> ClubUser:
        return self.create_user(**kwargs)


@pytest.fixture
def club_user_factory() -> ClubUserFactory:
    return ClubUserFactory()


@pytest.fixture
def member(club_user_factory: ClubUserFactory) -> ClubUser:
    """A regular club member."""
    return club_user_factory(email="member@example.com", name="Mia Member")


@pytest.fixture
def club_admin(club_user_factory: ClubUserFactory) -> ClubUser:
    """A club administrator."""
    return club_user_factory(email="admin@example.com", name="Ada Admin", is_staff=True)


def _client_for(user: ClubUser) -> Client:
    refresh = RefreshToken.for_user(user)
    return Client(HTTP_AUTHORIZATION=f"Bearer {str(refresh.access_token)}")  # type: ignore[attr-defined]


@pytest.fixture
def member_client(member: ClubUser) -> Client:
    """An API client authenticated as a regular member."""
    return _client_for(member)


@pytest.fixture
def club_admin_client(club_admin: ClubUser) -> Client:
    """An API client authenticated as an administrator."""
    return _client_for(club_admin)


@pytest.fixture
def next_week() -> datetime:
    same_time_next_week = timezone.now() + timedelta(days=7)
    return timezone.make_aware(
        datetime.combine(same_time_next_week.date(), time(hour=18, minute=30)),
        timezone.get_current_timezone(),
    )
