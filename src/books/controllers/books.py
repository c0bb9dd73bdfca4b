from django.db.models import QuerySet
from ninja import Query
from ninja_extra import api_controller, route

from books import filters, schema
from books.models import Book
from books.service import list_books
from common.controllers import UserAwareController


@api_controller("/books", tags=["Books"])
class BookController(UserAwareController):
    @route.get("", url_name="list_books", response=list[schema.BookSchema])
    def list_books(
        self,
        params: filters.BookFilterSchema = Query(...),  # type: ignore[type-arg]
    ) -> QuerySet[Book]:
        """Browse the club's book catalogue, featured books first.

        Filter with `is_featured`, `status`, `category` or `event_id`.
        """
        return params.filter(list_books())
