import typing as t

from events.service.contact_handoff import build_whatsapp_url


def test_builds_exact_url() -> None:
    assert build_whatsapp_url("15551234567", "Book Club") == (
        "https://wa.me/15551234567?text=Hello%21%20I%20just%20registered%20for%20the%20event%3A%20Book%20Club"
    )


def test_channel_is_not_validated() -> None:
    """A malformed channel gives a non-functional link rather than an error."""
    url = build_whatsapp_url("not a number", "X")

    assert url.startswith("https://wa.me/not a number?text=")


def test_title_is_fully_encoded() -> None:
    url = build_whatsapp_url("1", "Tea & Books / 2024?")

    assert url.endswith("Tea%20%26%20Books%20%2F%202024%3F")


def test_base_url_and_template_come_from_settings(settings: t.Any) -> None:
    settings.WHATSAPP_BASE_URL = "https://chat.example.com/"
    settings.WHATSAPP_GREETING_TEMPLATE = "Hi {title}"

    assert build_whatsapp_url("42", "Club") == "https://chat.example.com/42?text=Hi%20Club"
