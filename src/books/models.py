import typing as t

from django.db import models

from common.models import TimeStampedModel
from events.models import Event


class BookQuerySet(models.QuerySet["Book"]):
    def featured(self) -> t.Self:
        """Books picked for the home page."""
        return self.filter(is_featured=True)

    def available(self) -> t.Self:
        return self.filter(status=Book.BookStatus.AVAILABLE)

    def with_event(self) -> t.Self:
        return self.select_related("event")


class Book(TimeStampedModel):
    """A title in the club's catalogue, optionally tied to the event where it is discussed."""

    class BookStatus(models.TextChoices):
        AVAILABLE = "available"
        BORROWED = "borrowed"

    title = models.CharField(max_length=255, db_index=True)
    author = models.CharField(max_length=255)
    cover = models.URLField(max_length=500, blank=True, default="", help_text="Cover image URL")
    description = models.TextField(blank=True, default="")
    category = models.CharField(max_length=100, blank=True, default="", db_index=True)
    status = models.CharField(
        max_length=20, choices=BookStatus.choices, default=BookStatus.AVAILABLE, db_index=True
    )
    is_featured = models.BooleanField(default=False, db_index=True)
    event = models.ForeignKey(
        Event,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="books",
        help_text="The event where this book is discussed",
    )

    objects = BookQuerySet.as_manager()

    class Meta:
        ordering = ["-is_featured", "title"]

    def __str__(self) -> str:
        return f"{self.title} by {self.author}"
