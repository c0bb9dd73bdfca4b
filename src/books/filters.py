# src/books/filters.py
from uuid import UUID

from django.db.models import Q
from ninja import FilterSchema

from books.models import Book


class BookFilterSchema(FilterSchema):
    is_featured: bool | None = None
    status: Book.BookStatus | None = None
    category: str | None = None
    event_id: UUID | None = None

    def filter_category(self, category: str | None) -> Q:
        """Case-insensitive category match."""
        if category:
            return Q(category__iexact=category)
        return Q()
