"""Book catalogue schemas."""

from datetime import datetime
from uuid import UUID

from ninja import Schema
from pydantic import Field

from books.models import Book
from common.schema import OneToTwoFiftyFiveString, StrippedString


class BookEditSchema(Schema):
    """Edit payload. Omitted fields are left untouched; ``event_id: null`` unlinks the event."""

    title: OneToTwoFiftyFiveString | None = None
    author: OneToTwoFiftyFiveString | None = None
    cover: StrippedString | None = Field(None, max_length=500)
    description: StrippedString | None = None
    category: StrippedString | None = Field(None, max_length=100)
    status: Book.BookStatus | None = None
    is_featured: bool | None = None
    event_id: UUID | None = None


class BookCreateSchema(BookEditSchema):
    title: OneToTwoFiftyFiveString
    author: OneToTwoFiftyFiveString
    cover: StrippedString = Field("", max_length=500)
    description: StrippedString = ""
    category: StrippedString = Field("", max_length=100)
    status: Book.BookStatus = Book.BookStatus.AVAILABLE
    is_featured: bool = False


class BookSchema(Schema):
    id: UUID
    title: str
    author: str
    cover: str
    description: str
    category: str
    status: Book.BookStatus
    is_featured: bool
    event_id: UUID | None = None
    event_title: str | None = None

    @staticmethod
    def resolve_event_title(obj: Book) -> str | None:
        return obj.event.title if obj.event else None


class BookAdminSchema(BookSchema):
    created_at: datetime
    updated_at: datetime
