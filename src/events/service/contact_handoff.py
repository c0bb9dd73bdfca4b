"""Builds the messaging deep link shown after a successful registration."""

from urllib.parse import quote

from django.conf import settings


def build_whatsapp_url(channel: str, event_title: str) -> str:
    """Return the wa.me link pre-filled with the registration greeting.

    The channel is used verbatim and the whole message is percent-encoded, so
    ``build_whatsapp_url("15551234567", "Book Club")`` gives
    ``https://wa.me/15551234567?text=Hello%21%20I%20just%20registered%20for%20the%20event%3A%20Book%20Club``.
    """
    message = settings.WHATSAPP_GREETING_TEMPLATE.format(title=event_title)
    return f"{settings.WHATSAPP_BASE_URL.rstrip('/')}/{channel}?text={quote(message, safe='')}"
