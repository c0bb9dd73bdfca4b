"""Base admin components: mixins and inlines."""

import typing as t

from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from events import models


class UserLinkMixin:
    """Mixin to add a link to a user."""

    def user_link(self, obj: t.Any) -> str:
        user = obj.user
        url = reverse("admin:accounts_clubuser_change", args=[user.id])
        return format_html('<a href="{}">{}</a>', url, user.get_display_name())

    user_link.short_description = "User"  # type: ignore[attr-defined]


class EventLinkMixin:
    """Mixin to add a link to an event."""

    def event_link(self, obj: t.Any) -> str:
        url = reverse("admin:events_event_change", args=[obj.event.id])
        return format_html('<a href="{}">{}</a>', url, obj.event.title)

    event_link.short_description = "Event"  # type: ignore[attr-defined]


class TicketInline(admin.TabularInline):  # type: ignore[type-arg]
    model = models.Ticket
    extra = 0
    fields = ["name", "price", "quantity", "position"]
    ordering = ["position", "created_at"]


class ContactChannelInline(admin.TabularInline):  # type: ignore[type-arg]
    model = models.ContactChannel
    extra = 0
    fields = ["phone_number", "position"]


class RegistrationInline(UserLinkMixin, admin.TabularInline):  # type: ignore[type-arg]
    model = models.Registration
    extra = 0
    fields = ["user_link", "ticket_name", "form_responses", "created_at"]
    readonly_fields = ["user_link", "ticket_name", "form_responses", "created_at"]
    can_delete = True
    show_change_link = True

    def has_add_permission(self, request: t.Any, obj: t.Any = None) -> bool:
        return False
