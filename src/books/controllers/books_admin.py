import typing as t
from uuid import UUID

from django.db.models import QuerySet
from ninja_extra import api_controller, route, status
from ninja_extra.pagination import PageNumberPaginationExtra, PaginatedResponseSchema, paginate
from ninja_extra.searching import Searching, searching

from books import schema
from books import service as book_service
from books.models import Book
from common.auth_base import AdminJWTAuth
from common.controllers import UserAwareController
from common.schema import ValidationErrorResponse
from common.throttling import UserDefaultThrottle, WriteThrottle


@api_controller("/admin/books", auth=AdminJWTAuth(), tags=["Admin Books"], throttle=WriteThrottle())
class BookAdminController(UserAwareController):
    """Club administrators curate the book catalogue here."""

    def get_one(self, book_id: UUID) -> Book:
        return t.cast(Book, self.get_object_or_exception(book_service.list_books(), pk=book_id))

    @route.get(
        "",
        url_name="admin_list_books",
        response=PaginatedResponseSchema[schema.BookAdminSchema],
        throttle=UserDefaultThrottle(),
    )
    @paginate(PageNumberPaginationExtra, page_size=50)
    @searching(Searching, search_fields=["title", "author", "category"])
    def list_books(self) -> QuerySet[Book]:
        """List the whole catalogue. Supports `?search=` on title, author and category."""
        return book_service.list_books()

    @route.get(
        "/{book_id}", url_name="admin_get_book", response=schema.BookAdminSchema, throttle=UserDefaultThrottle()
    )
    def get_book(self, book_id: UUID) -> Book:
        return self.get_one(book_id)

    @route.post(
        "",
        url_name="create_book",
        response={201: schema.BookAdminSchema, 400: ValidationErrorResponse},
    )
    def create_book(self, payload: schema.BookCreateSchema) -> tuple[int, Book]:
        """Add a book, optionally linked to the event where it is discussed."""
        book = book_service.create_book(payload)
        return status.HTTP_201_CREATED, self.get_one(book.pk)

    @route.put(
        "/{book_id}",
        url_name="update_book",
        response={200: schema.BookAdminSchema, 400: ValidationErrorResponse},
    )
    def update_book(self, book_id: UUID, payload: schema.BookEditSchema) -> Book:
        """Edit a book. Omitted fields are left untouched; `event_id: null` unlinks the event."""
        book = book_service.update_book(self.get_one(book_id), payload)
        return self.get_one(book.pk)

    @route.delete("/{book_id}", url_name="delete_book", response={204: None})
    def delete_book(self, book_id: UUID) -> tuple[int, None]:
        book_service.delete_book(self.get_one(book_id))
        return 204, None
