"""Bootstrap the application by creating the admin user and example data."""

import typing as t

from decouple import config
from django.core.management import call_command
from django.core.management.base import BaseCommand

from accounts.models import ClubUser


class Command(BaseCommand):
    help = "Bootstrap the application by creating the admin user, example events and books."

    def add_arguments(self, parser: t.Any) -> None:
        """Add command arguments."""
        parser.add_argument(
            "--skip-events", action="store_true", help="Only create the admin user, without example events or books."
        )

    def handle(self, *args: t.Any, **options: t.Any) -> None:
        """Migrate, create the admin user and generate example events."""
        call_command("migrate", verbosity=0)
        default_email, default_password = "admin@lumina.com", "admin123"
        email = config("DEFAULT_ADMIN_EMAIL", default=default_email).lower()
        password = config("DEFAULT_ADMIN_PASSWORD", default=default_password)

        if ClubUser.objects.filter(email=email).exists():
            self.stdout.write(self.style.WARNING(f"Admin '{email}' already exists."))
        else:
            ClubUser.objects.create_superuser(username=email, email=email, password=password, name="Admin")
            self.stdout.write(self.style.SUCCESS(f"Admin '{email}' created successfully."))

            if password == default_password:
                self.stdout.write(
                    self.style.WARNING("The default password is being used. Please change it immediately.")
                )

        if not options.get("skip_events"):
            call_command("bootstrap_events")
            call_command("bootstrap_books")
