"""Admin classes for tickets and registrations."""

from django.contrib import admin

from events import models
from events.admin.base import EventLinkMixin, UserLinkMixin


@admin.register(models.Ticket)
class TicketAdmin(EventLinkMixin, admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "event_link", "price", "quantity", "position"]
    search_fields = ["name", "event__title"]
    list_select_related = ["event"]


@admin.register(models.Registration)
class RegistrationAdmin(UserLinkMixin, EventLinkMixin, admin.ModelAdmin):  # type: ignore[type-arg]
    """Registrations are read-only records; administrators may only delete them."""

    list_display = ["user_link", "event_link", "ticket_name", "created_at"]
    list_filter = ["event", "created_at"]
    search_fields = ["user__email", "user__name", "event__title"]
    list_select_related = ["user", "event"]
    readonly_fields = ["user", "event", "ticket", "ticket_name", "form_responses", "created_at"]

    def has_add_permission(self, request: object) -> bool:  # type: ignore[override]
        return False
