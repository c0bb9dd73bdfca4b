from datetime import datetime, timedelta

import pytest
from freezegun import freeze_time

from events.models import Event
from events.service.registration_gate import Reasons, RegistrationClosedError, RegistrationGateService

pytestmark = pytest.mark.django_db

OPENS = datetime.fromisoformat("2026-03-01T10:00:00+00:00")
CLOSES = datetime.fromisoformat("2026-03-10T10:00:00+00:00")


@pytest.fixture
def windowed_event() -> Event:
    return Event.objects.create(
        title="Windowed",
        event_date=CLOSES + timedelta(days=5),
        registration_start_date=OPENS,
        registration_end_date=CLOSES,
    )


def test_no_bounds_is_always_open(event: Event) -> None:
    eligibility = RegistrationGateService(event).check()

    assert eligibility.allowed is True
    assert eligibility.reason is None
    assert eligibility.event_id == event.pk


@pytest.mark.parametrize(
    "status", [Event.EventStatus.CLOSED, Event.EventStatus.COMPLETED], ids=["closed", "completed"]
)
def test_only_upcoming_events_accept_registrations(event: Event, status: Event.EventStatus) -> None:
    event.status = status
    event.save()

    eligibility = RegistrationGateService(event).check()

    assert eligibility.allowed is False
    assert eligibility.reason == Reasons.EVENT_NOT_UPCOMING
    assert eligibility.status == status


@pytest.mark.parametrize(
    "now,allowed,reason",
    [
        (OPENS - timedelta(seconds=1), False, Reasons.REGISTRATION_NOT_OPEN_YET),
        (OPENS, True, None),
        (CLOSES - timedelta(seconds=1), True, None),
        (CLOSES, False, Reasons.REGISTRATION_CLOSED),
        (CLOSES + timedelta(days=1), False, Reasons.REGISTRATION_CLOSED),
    ],
    ids=["before-start", "at-start", "before-end", "at-end", "after-end"],
)
def test_window_is_half_open(windowed_event: Event, now: datetime, allowed: bool, reason: Reasons | None) -> None:
    eligibility = RegistrationGateService(windowed_event, now=now).check()

    assert eligibility.allowed is allowed
    assert eligibility.reason == reason
    assert eligibility.opens_at == OPENS
    assert eligibility.closes_at == CLOSES


def test_bounds_apply_independently(next_week: datetime) -> None:
    only_start = Event.objects.create(title="Start", event_date=next_week, registration_start_date=OPENS)
    only_end = Event.objects.create(title="End", event_date=next_week, registration_end_date=CLOSES)

    assert RegistrationGateService(only_start, now=OPENS + timedelta(days=365)).check().allowed is True
    assert RegistrationGateService(only_end, now=OPENS - timedelta(days=365)).check().allowed is True
    assert RegistrationGateService(only_end, now=CLOSES).check().allowed is False


def test_status_is_checked_before_window(windowed_event: Event) -> None:
    windowed_event.status = Event.EventStatus.COMPLETED
    windowed_event.save()

    eligibility = RegistrationGateService(windowed_event, now=OPENS - timedelta(days=1)).check()

    assert eligibility.reason == Reasons.EVENT_NOT_UPCOMING


def test_defaults_to_current_time(windowed_event: Event) -> None:
    with freeze_time(OPENS + timedelta(hours=1)):
        assert RegistrationGateService(windowed_event).check().allowed is True
    with freeze_time(CLOSES):
        assert RegistrationGateService(windowed_event).check().allowed is False


def test_assert_open_raises_with_eligibility(windowed_event: Event) -> None:
    with pytest.raises(RegistrationClosedError) as exc_info:
        RegistrationGateService(windowed_event, now=CLOSES).assert_open()

    assert exc_info.value.eligibility.allowed is False
    assert exc_info.value.eligibility.reason == Reasons.REGISTRATION_CLOSED
