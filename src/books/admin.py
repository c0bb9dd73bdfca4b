from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from books.models import Book


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["title", "author", "category", "status", "is_featured", "event_link"]
    list_filter = ["status", "is_featured", "category"]
    list_editable = ["is_featured"]
    search_fields = ["title", "author", "category"]
    autocomplete_fields = ["event"]
    list_select_related = ["event"]

    def event_link(self, obj: Book) -> str:
        if obj.event is None:
            return "-"
        url = reverse("admin:events_event_change", args=[obj.event.id])
        return format_html('<a href="{}">{}</a>', url, obj.event.title)

    event_link.short_description = "Event"  # type: ignore[attr-defined]
