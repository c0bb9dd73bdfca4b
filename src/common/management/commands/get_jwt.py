"""Print a JWT pair for a club user."""

import typing as t

from django.core.management.base import BaseCommand, CommandError

from accounts.models import ClubUser
from accounts.service.auth import get_token_pair_for_user


class Command(BaseCommand):
    help = "Print JWT access and refresh tokens for a user, with the same claims as login."

    def add_arguments(self, parser: t.Any) -> None:
        """Add command arguments."""
        parser.add_argument("email", type=str, help="Email address of the user")

    def handle(self, *args: t.Any, **options: t.Any) -> None:
        """Issue the token pair for the given user."""
        email = options["email"].lower()
        user = ClubUser.objects.filter(email=email).first()
        if user is None:
            raise CommandError(f'User with email "{email}" does not exist')

        pair = get_token_pair_for_user(user)

        self.stdout.write(self.style.SUCCESS(f"JWT tokens for {user.email} ({user.role})"))
        self.stdout.write(self.style.SUCCESS("Access Token:"))
        self.stdout.write(pair.access)
        self.stdout.write(self.style.SUCCESS("Refresh Token:"))
        self.stdout.write(pair.refresh)
