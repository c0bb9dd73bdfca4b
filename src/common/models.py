import typing as t
import uuid

from django.db import models, transaction


class TimeStampedModel(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        abstract = True

    def save(self, *args: t.Any, **kwargs: t.Any) -> None:
        """Override the save method to call full_clean before saving."""
        self.full_clean()
        super().save(*args, **kwargs)


DEFAULT_SITE_SETTINGS: dict[str, str] = {
    "site_name": "Lumina Book Club",
    "site_logo": "",
    "payment_provider": "stripe",
    "payment_public_key": "",
    "payment_secret_key": "",
    "contact_email": "contact@lumina.com",
    "whatsapp_group_link": "",
}


class SiteSettingQuerySet(models.QuerySet["SiteSetting"]):
    def as_dict(self) -> dict[str, str]:
        """Return all settings as a flat key-value mapping."""
        return dict(self.values_list("key", "value"))


class SiteSettingManager(models.Manager["SiteSetting"]):
    def get_queryset(self) -> SiteSettingQuerySet:
        """Get the SiteSetting queryset."""
        return SiteSettingQuerySet(self.model, using=self._db)

    def as_dict(self) -> dict[str, str]:
        """Return the stored settings, falling back to the defaults for missing keys."""
        return {**DEFAULT_SITE_SETTINGS, **self.get_queryset().as_dict()}

    @transaction.atomic
    def upsert_many(self, values: t.Mapping[str, t.Any]) -> dict[str, str]:
        """Create or overwrite every given key. Values are stored as strings."""
        for key, value in values.items():
            self.update_or_create(key=key, defaults={"value": "" if value is None else str(value)})
        return self.as_dict()


class SiteSetting(models.Model):
    """A single key-value site configuration entry (site name, payment keys, contact details...)."""

    key = models.CharField(max_length=100, primary_key=True)
    value = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    objects = SiteSettingManager()

    class Meta:
        ordering = ["key"]

    def __str__(self) -> str:  # pragma: no cover
        return self.key
