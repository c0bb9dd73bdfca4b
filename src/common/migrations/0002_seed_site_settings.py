# Seed the key-value site settings with their defaults
from django.db import migrations

DEFAULTS = {
    "site_name": "Lumina Book Club",
    "site_logo": "",
    "payment_provider": "stripe",
    "payment_public_key": "",
    "payment_secret_key": "",
    "contact_email": "contact@lumina.com",
    "whatsapp_group_link": "",
}


def seed_site_settings(apps, schema_editor):
    """Insert the default settings without overwriting existing values."""
    SiteSetting = apps.get_model("common", "SiteSetting")
    existing = set(SiteSetting.objects.values_list("key", flat=True))
    SiteSetting.objects.bulk_create(
        [SiteSetting(key=key, value=value) for key, value in DEFAULTS.items() if key not in existing]
    )


def remove_site_settings(apps, schema_editor):
    SiteSetting = apps.get_model("common", "SiteSetting")
    SiteSetting.objects.filter(key__in=DEFAULTS.keys()).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("common", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_site_settings, remove_site_settings),
    ]
