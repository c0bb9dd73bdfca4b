from django.core.exceptions import ValidationError as DjangoValidationError


class FormSchemaError(DjangoValidationError):
    """Raised when an event's form field definitions are malformed."""


class NotFoundError(Exception):
    """Raised when a referenced event, ticket, user or registration does not exist."""


class PersistenceError(Exception):
    """Raised when a write to the database fails for reasons other than validation."""


class ValidationFailed(Exception):
    """Raised when submitted answers do not satisfy an event's registration form.

    ``field`` is the label of the first violated field in form order, ``errors`` maps
    every violated label to a message.
    """

    def __init__(self, message: str, *, field: str, errors: dict[str, str]) -> None:
        """Initialize the exception with the violated fields."""
        super().__init__(message)
        self.field = field
        self.errors = errors
