import logging
import typing as t
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from faker import Faker

from accounts.models import ClubUser
from events import models as events_models
from events.schema import FormField, FormFieldType
from events.service.form_schema import dump_form_fields

logger = logging.getLogger(__name__)

MEMBER_PASSWORD = "password123"  # noqa: S105


class Command(BaseCommand):
    """Bootstrap example data: a handful of members and a few events.

    One upcoming physical event with a form, tickets and registrations, one online event
    whose registration has not opened yet, and one completed event.
    """

    help = "Bootstrap example events, tickets and registrations."

    def __init__(self, *args: t.Any, **kwargs: t.Any) -> None:
        """Initialize the command with storage for created objects."""
        super().__init__(*args, **kwargs)
        self.fake = Faker("en_US")
        self.members: list[ClubUser] = []

    def add_arguments(self, parser: t.Any) -> None:
        """Add the number of members to create."""
        parser.add_argument("--members", type=int, default=5, help="How many members to create.")
        parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible data.")

    @transaction.atomic
    def handle(self, *args: t.Any, **options: t.Any) -> None:
        """Bootstrap example data."""
        if options.get("seed") is not None:
            Faker.seed(options["seed"])
        if events_models.Event.objects.exists():
            self.stdout.write(self.style.WARNING("Events already exist, skipping."))
            return
        logger.info("Starting events bootstrap...")
        self._create_members(options.get("members", 5))
        event = self._create_book_discussion()
        self._create_author_talk()
        self._create_past_meetup()
        self._register_members(event)
        logger.info("Events bootstrap complete.")
        self.stdout.write(self.style.SUCCESS(f"Created {len(self.members)} members and 3 events."))

    def _create_members(self, count: int) -> None:
        for _ in range(count):
            email = self.fake.unique.email()
            member = ClubUser.objects.create_user(
                username=email, email=email, password=MEMBER_PASSWORD, name=self.fake.name()
            )
            self.members.append(member)

    def _create_book_discussion(self) -> events_models.Event:
        now = timezone.now()
        form = [
            FormField(
                label="Have you read the book?",
                type=FormFieldType.SELECT,
                required=True,
                options=["Yes", "Halfway", "Not yet"],
            ),
            FormField(label="Dietary", type=FormFieldType.TEXT),
            FormField(label="I agree to the code of conduct", type=FormFieldType.CHECKBOX, required=True),
        ]
        event = events_models.Event.objects.create(
            title="Monthly Book Discussion",
            description=self.fake.paragraph(nb_sentences=4),
            event_date=now + timedelta(days=14),
            location=self.fake.address().replace("\n", ", "),
            event_type=events_models.Event.EventType.PHYSICAL,
            whatsapp_number="15551234567",
            form_fields=dump_form_fields(form),
            registration_start_date=now - timedelta(days=1),
            registration_end_date=now + timedelta(days=13),
        )
        events_models.Ticket.objects.create(event=event, name="Standard", price=Decimal("10.00"), quantity=40)
        events_models.Ticket.objects.create(
            event=event, name="Supporter", price=Decimal("25.00"), quantity=10, position=1
        )
        return event

    def _create_author_talk(self) -> events_models.Event:
        now = timezone.now()
        event = events_models.Event.objects.create(
            title="Online Author Talk",
            description=self.fake.paragraph(nb_sentences=3),
            event_date=now + timedelta(days=45),
            event_type=events_models.Event.EventType.ONLINE,
            whatsapp_number="15557654321",
            form_fields=dump_form_fields([FormField(label="Question for the author", type=FormFieldType.TEXT)]),
            registration_start_date=now + timedelta(days=7),
        )
        events_models.Ticket.objects.create(event=event)
        return event

    def _create_past_meetup(self) -> events_models.Event:
        return events_models.Event.objects.create(
            title="Summer Reading Picnic",
            description=self.fake.paragraph(nb_sentences=2),
            event_date=timezone.now() - timedelta(days=30),
            location=self.fake.city(),
            status=events_models.Event.EventStatus.COMPLETED,
        )

    def _register_members(self, event: events_models.Event) -> None:
        ticket = event.tickets.order_by("position").first()
        for member in self.members[:3]:
            events_models.Registration.objects.create(
                user=member,
                event=event,
                ticket=ticket,
                ticket_name=ticket.name if ticket else "",
                form_responses={
                    "Have you read the book?": self.fake.random_element(["Yes", "Halfway", "Not yet"]),
                    "I agree to the code of conduct": True,
                },
            )
