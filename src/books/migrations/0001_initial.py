import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("events", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Book",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("title", models.CharField(db_index=True, max_length=255)),
                ("author", models.CharField(max_length=255)),
                ("cover", models.URLField(blank=True, default="", help_text="Cover image URL", max_length=500)),
                ("description", models.TextField(blank=True, default="")),
                ("category", models.CharField(blank=True, db_index=True, default="", max_length=100)),
                (
                    "status",
                    models.CharField(
                        choices=[("available", "Available"), ("borrowed", "Borrowed")],
                        db_index=True,
                        default="available",
                        max_length=20,
                    ),
                ),
                ("is_featured", models.BooleanField(db_index=True, default=False)),
                (
                    "event",
                    models.ForeignKey(
                        blank=True,
                        help_text="The event where this book is discussed",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="books",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "ordering": ["-is_featured", "title"],
            },
        ),
    ]
