import uuid

import pytest

from books import schema
from books import service as book_service
from books.models import Book
from events.exceptions import NotFoundError
from events.models import Event

pytestmark = pytest.mark.django_db


class TestCreateBook:
    def test_defaults(self) -> None:
        book = book_service.create_book(schema.BookCreateSchema(title="  Dune ", author="Frank Herbert"))

        assert book.title == "Dune"
        assert book.status == Book.BookStatus.AVAILABLE
        assert book.is_featured is False
        assert book.event is None

    def test_linked_to_event(self, event: Event) -> None:
        payload = schema.BookCreateSchema(title="Dune", author="Frank Herbert", is_featured=True, event_id=event.pk)

        book = book_service.create_book(payload)

        assert book.event == event
        assert list(event.books.all()) == [book]

    def test_unknown_event(self) -> None:
        payload = schema.BookCreateSchema(title="Dune", author="Frank Herbert", event_id=uuid.uuid4())

        with pytest.raises(NotFoundError):
            book_service.create_book(payload)

        assert not Book.objects.exists()


class TestUpdateBook:
    def test_only_given_fields_change(self, featured_book: Book, event: Event) -> None:
        book = book_service.update_book(featured_book, schema.BookEditSchema(status=Book.BookStatus.BORROWED))

        assert book.status == Book.BookStatus.BORROWED
        assert book.title == "The Great Gatsby"
        assert book.is_featured is True
        assert book.event == event

    def test_null_event_unlinks(self, featured_book: Book) -> None:
        book = book_service.update_book(featured_book, schema.BookEditSchema(event_id=None))

        assert book.event is None

    def test_link_to_event(self, book: Book, event: Event) -> None:
        assert book_service.update_book(book, schema.BookEditSchema(event_id=event.pk)).event == event

    def test_unknown_event_leaves_book_untouched(self, book: Book) -> None:
        with pytest.raises(NotFoundError):
            book_service.update_book(book, schema.BookEditSchema(title="Renamed", event_id=uuid.uuid4()))

        book.refresh_from_db()
        assert book.title == "Middlemarch"


def test_delete_book(book: Book) -> None:
    book_service.delete_book(book)

    assert not Book.objects.exists()
