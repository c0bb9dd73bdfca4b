from django.contrib import admin

from . import models


@admin.register(models.SiteSetting)
class SiteSettingAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["key", "value", "updated_at"]
    readonly_fields = ["updated_at"]
    search_fields = ["key", "value"]
