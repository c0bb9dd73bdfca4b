from datetime import timedelta
from decimal import Decimal

import orjson
import pytest
from django.test.client import Client
from django.urls import reverse
from django.utils import timezone

from accounts.models import ClubUser
from events.models import Event, Registration, Ticket

pytestmark = pytest.mark.django_db

REGISTER_URL = reverse("api:register_for_event")


def _register(client: Client, payload: dict[str, object]):  # type: ignore[no-untyped-def]
    return client.post(REGISTER_URL, data=orjson.dumps(payload), content_type="application/json")


# --- Tests for GET /events ---


def test_list_events_is_public_and_chronological(client: Client, event: Event, closed_event: Event) -> None:
    closed_event.event_date = event.event_date - timedelta(days=1)
    closed_event.save()

    response = client.get(reverse("api:list_events"))

    assert response.status_code == 200
    data = response.json()
    assert [e["title"] for e in data] == ["Closed Club", "Book Club"]
    assert [e["registration_open"] for e in data] == [False, True]


def test_list_events_shows_form_and_tickets(client: Client, dietary_event: Event) -> None:
    Ticket.objects.create(event=dietary_event, name="Standard", price=Decimal("10"))

    (data,) = client.get(reverse("api:list_events")).json()

    assert data["form_fields"] == [
        {"id": "diet", "label": "Dietary", "type": "text", "required": True, "options": None}
    ]
    assert [t["name"] for t in data["tickets"]] == ["Standard"]
    assert Decimal(str(data["tickets"][0]["price"])) == Decimal("10")
    assert "registrations" not in data


def test_list_events_filters(client: Client, event: Event, closed_event: Event) -> None:
    closed_event.status = Event.EventStatus.COMPLETED
    closed_event.event_date = timezone.now() - timedelta(days=2)
    closed_event.save()

    upcoming = client.get(reverse("api:list_events"), {"status": "upcoming"}).json()
    past = client.get(reverse("api:list_events"), {"past_events": True}).json()

    assert [e["title"] for e in upcoming] == ["Book Club"]
    assert [e["title"] for e in past] == ["Closed Club"]


def test_get_event(client: Client, event: Event) -> None:
    response = client.get(reverse("api:get_event", kwargs={"event_id": event.pk}))

    assert response.status_code == 200
    assert response.json()["id"] == str(event.pk)


def test_get_unknown_event(client: Client) -> None:
    response = client.get(reverse("api:get_event", kwargs={"event_id": "00000000-0000-0000-0000-000000000000"}))

    assert response.status_code == 404


# --- Tests for POST /events/register ---


def test_register_route_is_not_shadowed_by_event_detail(member_client: Client, dietary_event: Event) -> None:
    assert REGISTER_URL == "/api/events/register"

    response = member_client.post(
        "/api/events/register",
        data=orjson.dumps({"event_id": str(dietary_event.pk), "form_responses": {"diet": "None"}}),
        content_type="application/json",
    )

    assert response.status_code == 201
    assert Registration.objects.filter(event=dietary_event).count() == 1


def test_register_requires_authentication(client: Client, event: Event) -> None:
    assert _register(client, {"event_id": str(event.pk)}).status_code == 401


def test_register_success(member_client: Client, member: ClubUser, dietary_event: Event) -> None:
    response = _register(member_client, {"event_id": str(dietary_event.pk), "form_responses": {"diet": "Vegan"}})

    assert response.status_code == 201
    data = response.json()
    assert data["whatsapp_url"].startswith("https://wa.me/15551234567?text=")
    registration = Registration.objects.get(pk=data["registration_id"])
    assert registration.user == member
    assert registration.form_responses == {"Dietary": "Vegan"}


def test_register_missing_required_answer(member_client: Client, dietary_event: Event) -> None:
    response = _register(member_client, {"event_id": str(dietary_event.pk), "form_responses": {}})

    assert response.status_code == 400
    data = response.json()
    assert data["field"] == "Dietary"
    assert data["errors"] == {"Dietary": "This field is required."}
    assert not Registration.objects.exists()


def test_register_closed_window(member_client: Client, closed_event: Event) -> None:
    response = _register(member_client, {"event_id": str(closed_event.pk)})

    assert response.status_code == 400
    data = response.json()
    assert data["allowed"] is False
    assert data["reason"] == "Registration has closed."


def test_register_unknown_event(member_client: Client) -> None:
    response = _register(member_client, {"event_id": "00000000-0000-0000-0000-000000000000"})

    assert response.status_code == 404


def test_register_wrong_ticket(member_client: Client, event: Event, dietary_event: Event) -> None:
    foreign = Ticket.objects.create(event=dietary_event, name="Foreign")

    response = _register(member_client, {"event_id": str(event.pk), "ticket_id": str(foreign.pk)})

    assert response.status_code == 404
    assert not Registration.objects.exists()


def test_register_malformed_payload(member_client: Client) -> None:
    response = _register(member_client, {"event_id": "not-a-uuid"})

    assert response.status_code == 422


def test_member_cannot_register_someone_else(member_client: Client, event: Event, club_admin: ClubUser) -> None:
    response = _register(member_client, {"event_id": str(event.pk), "user_id": str(club_admin.pk)})

    assert response.status_code == 403
    assert not Registration.objects.exists()


def test_admin_can_register_a_member(club_admin_client: Client, event: Event, member: ClubUser) -> None:
    response = _register(club_admin_client, {"event_id": str(event.pk), "user_id": str(member.pk)})

    assert response.status_code == 201
    assert Registration.objects.get().user == member
