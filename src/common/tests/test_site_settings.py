import orjson
import pytest
from django.test.client import Client
from django.urls import reverse

from common.models import DEFAULT_SITE_SETTINGS, SiteSetting

pytestmark = pytest.mark.django_db


def test_defaults_are_merged() -> None:
    SiteSetting.objects.create(key="site_name", value="Night Owls")

    values = SiteSetting.objects.as_dict()

    assert values["site_name"] == "Night Owls"
    assert values["contact_email"] == DEFAULT_SITE_SETTINGS["contact_email"]


def test_upsert_many_stores_strings() -> None:
    SiteSetting.objects.upsert_many({"site_name": "Owls", "max_guests": 4, "show_logo": True, "site_logo": None})

    assert SiteSetting.objects.get(key="max_guests").value == "4"
    assert SiteSetting.objects.get(key="show_logo").value == "True"
    assert SiteSetting.objects.get(key="site_logo").value == ""
    SiteSetting.objects.upsert_many({"site_name": "Larks"})
    assert SiteSetting.objects.filter(key="site_name").count() == 1
    assert SiteSetting.objects.as_dict()["site_name"] == "Larks"


def test_get_settings_requires_admin(client: Client, member_client: Client) -> None:
    url = reverse("api:get_site_settings")

    assert client.get(url).status_code == 401
    assert member_client.get(url).status_code == 403


def test_get_settings(club_admin_client: Client) -> None:
    response = club_admin_client.get(reverse("api:get_site_settings"))

    assert response.status_code == 200
    assert response.json() == {"settings": DEFAULT_SITE_SETTINGS}


def test_update_settings(club_admin_client: Client) -> None:
    payload = {"settings": {"site_name": "Lumina Readers", "whatsapp_group_link": "https://chat.example/x"}}

    response = club_admin_client.post(
        reverse("api:update_site_settings"), data=orjson.dumps(payload), content_type="application/json"
    )

    assert response.status_code == 200
    data = response.json()["settings"]
    assert data["site_name"] == "Lumina Readers"
    assert data["whatsapp_group_link"] == "https://chat.example/x"
    assert data["contact_email"] == DEFAULT_SITE_SETTINGS["contact_email"]
