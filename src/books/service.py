"""Book catalogue: create, edit and delete books and link them to events."""

import typing as t
from uuid import UUID

import structlog
from django.db import transaction

from books import schema
from books.models import Book, BookQuerySet
from events.exceptions import NotFoundError
from events.models import Event
from events.service import update_db_instance

logger = structlog.get_logger(__name__)


def list_books() -> BookQuerySet:
    """The whole catalogue, featured books first, with the linked event selected."""
    return Book.objects.with_event()


def _resolve_event(event_id: UUID | None) -> Event | None:
    if event_id is None:
        return None
    event = Event.objects.filter(pk=event_id).first()
    if event is None:
        raise NotFoundError("Event not found.")
    return event


@transaction.atomic
def create_book(payload: schema.BookCreateSchema) -> Book:
    """Add a book to the catalogue.

    Raises:
        NotFoundError: ``event_id`` names an unknown event.
    """
    book = Book(**payload.model_dump(exclude={"event_id"}), event=_resolve_event(payload.event_id))
    book.save()
    logger.info("book_created", book_id=str(book.pk), event_id=str(book.event_id) if book.event_id else None)
    return book


@transaction.atomic
def update_book(book: Book, payload: schema.BookEditSchema) -> Book:
    """Apply an edit in place. Only the fields present in the payload change."""
    extra: dict[str, t.Any] = {}
    if "event_id" in payload.model_fields_set:
        extra["event"] = _resolve_event(payload.event_id)
    book = update_db_instance(book, payload, exclude={"event_id"}, **extra)
    logger.info("book_updated", book_id=str(book.pk), fields=sorted(payload.model_fields_set))
    return book


def delete_book(book: Book) -> None:
    book_id = str(book.pk)
    book.delete()
    logger.info("book_deleted", book_id=book_id)
