import typing as t

import structlog
from django.http import HttpRequest, HttpResponse
from django.test import RequestFactory

from common.middleware import StructlogContextMiddleware
from lumina.settings.observability import add_app_context, scrub_pii


def test_scrub_pii_redacts_secrets_and_emails() -> None:
    event = {
        "event": "user_login_succeeded",
        "password1": "hunter2",
        "payment_secret_key": "sk_live",
        "note": "contact reader@example.com please",
        "email": "reader@example.com",
        "nested": {"token": "abc", "comment": "ping a@b.io"},
    }

    scrubbed = scrub_pii(None, "info", event)

    assert scrubbed["password1"] == "[REDACTED]"
    assert scrubbed["payment_secret_key"] == "[REDACTED]"
    assert scrubbed["note"] == "contact [EMAIL] please"
    assert scrubbed["email"] == "reader@example.com"
    assert scrubbed["nested"] == {"token": "[REDACTED]", "comment": "ping [EMAIL]"}


def test_add_app_context() -> None:
    event = add_app_context(None, "info", {"event": "x"})

    assert event["service"] == "lumina"
    assert {"version", "environment"} <= set(event)


class TestStructlogContextMiddleware:
    def _middleware(self, seen: dict[str, object]) -> StructlogContextMiddleware:
        def get_response(request: HttpRequest) -> HttpResponse:
            seen.update(structlog.contextvars.get_contextvars())
            return HttpResponse("ok")

        return StructlogContextMiddleware(get_response)

    def test_binds_request_context(self) -> None:
        seen: dict[str, object] = {}
        request = RequestFactory().get("/api/events", HTTP_X_FORWARDED_FOR="203.0.113.7, 10.0.0.1")

        response = self._middleware(seen)(request)

        assert seen["method"] == "GET"
        assert seen["path"] == "/api/events"
        assert seen["ip_address"] == "203.0.113.7"
        assert response["X-Request-ID"] == seen["request_id"]
        assert structlog.contextvars.get_contextvars() == {}

    def test_reuses_incoming_request_id(self) -> None:
        seen: dict[str, object] = {}
        request = RequestFactory().get("/api/version", HTTP_X_REQUEST_ID="req-123")

        response = self._middleware(seen)(request)

        assert seen["request_id"] == "req-123"
        assert response["X-Request-ID"] == "req-123"

    def test_disabled(self, settings: t.Any) -> None:
        settings.ENABLE_OBSERVABILITY = False
        seen: dict[str, object] = {}

        response = self._middleware(seen)(RequestFactory().get("/"))

        assert seen == {}
        assert "X-Request-ID" not in response
