from io import StringIO

import pytest
from django.core.management import call_command

from accounts.models import ClubUser
from events.models import Event, Registration

pytestmark = pytest.mark.django_db


def test_bootstrap_events() -> None:
    out = StringIO()

    call_command("bootstrap_events", "--members", "4", "--seed", "1", stdout=out)

    assert Event.objects.count() == 3
    assert ClubUser.objects.members().count() == 4
    assert Registration.objects.count() == 3
    assert "Created 4 members and 3 events." in out.getvalue()


def test_bootstrap_events_is_idempotent(event: Event) -> None:
    out = StringIO()

    call_command("bootstrap_events", stdout=out)

    assert Event.objects.count() == 1
    assert "already exist" in out.getvalue()


def test_get_jwt(member: ClubUser) -> None:
    out = StringIO()

    call_command("get_jwt", member.email, stdout=out)

    assert "Access Token:" in out.getvalue()
