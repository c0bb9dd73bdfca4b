"""Admin classes for Event."""

from django.contrib import admin
from django.db.models import Count, QuerySet
from django.http import HttpRequest

from events import models
from events.admin.base import ContactChannelInline, RegistrationInline, TicketInline


@admin.register(models.Event)
class EventAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    """Admin model for Events."""

    list_display = ["title", "event_type", "status", "event_date", "registration_count", "whatsapp_number"]
    list_filter = ["event_type", "status", "event_date"]
    search_fields = ["title", "location"]
    date_hierarchy = "event_date"
    inlines = [TicketInline, ContactChannelInline, RegistrationInline]
    fieldsets = [
        ("Details", {"fields": ("title", "description", ("event_date", "location"), ("event_type", "status"))}),
        ("Registration", {"fields": (("registration_start_date", "registration_end_date"), "form_fields")}),
        ("Contact", {"fields": ("whatsapp_number",)}),
    ]

    def get_queryset(self, request: HttpRequest) -> QuerySet[models.Event]:
        return super().get_queryset(request).annotate(num_registrations=Count("registrations"))

    @admin.display(description="Registrations", ordering="num_registrations")
    def registration_count(self, obj: models.Event) -> int:
        return obj.num_registrations  # type: ignore[attr-defined,no-any-return]
