import logging
import typing as t

from django.core.management.base import BaseCommand
from django.db import transaction
from faker import Faker

from books.models import Book
from events.models import Event

logger = logging.getLogger(__name__)

FEATURED_BOOKS = [
    {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "category": "Classic",
        "description": "A story of wealth, love, and the American Dream.",
        "cover": "https://picsum.photos/seed/gatsby/400/600",
    },
    {
        "title": "Atomic Habits",
        "author": "James Clear",
        "category": "Self-Help",
        "description": "An easy and proven way to build good habits and break bad ones.",
        "cover": "https://picsum.photos/seed/habits/400/600",
    },
]


class Command(BaseCommand):
    """Seed the catalogue with two featured books and a few generated ones.

    The first featured book is linked to the first upcoming event, when there is one.
    """

    help = "Bootstrap example books."

    def add_arguments(self, parser: t.Any) -> None:
        """Add the number of extra books to generate."""
        parser.add_argument("--extra", type=int, default=3, help="How many generated books to add.")
        parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible data.")

    @transaction.atomic
    def handle(self, *args: t.Any, **options: t.Any) -> None:
        """Bootstrap example books."""
        if Book.objects.exists():
            self.stdout.write(self.style.WARNING("Books already exist, skipping."))
            return
        fake = Faker("en_US")
        if options.get("seed") is not None:
            Faker.seed(options["seed"])

        event = Event.objects.upcoming().chronological().first()
        for index, data in enumerate(FEATURED_BOOKS):
            Book.objects.create(**data, is_featured=True, event=event if index == 0 else None)
        extra = options.get("extra", 3)
        for _ in range(extra):
            Book.objects.create(
                title=fake.catch_phrase(),
                author=fake.name(),
                category=fake.random_element(["Fiction", "Poetry", "History", "Science"]),
                description=fake.paragraph(nb_sentences=2),
                status=fake.random_element(list(Book.BookStatus.values)),
            )
        logger.info("Books bootstrap complete.")
        self.stdout.write(self.style.SUCCESS(f"Created {len(FEATURED_BOOKS) + extra} books."))
