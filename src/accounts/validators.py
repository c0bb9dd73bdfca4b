import re

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

# Optional leading +, then 7 to 15 digits once separators are removed
PHONE_REGEX = re.compile(r"^\+?\d{7,15}$")
PHONE_SEPARATORS = re.compile(r"[ \-().]")


def normalize_phone_number(value: str) -> str:
    """Strip spaces, dashes, dots and parentheses from a phone number."""
    return PHONE_SEPARATORS.sub("", value)


def validate_phone_number(value: str | None) -> None:
    """Validate a member's phone number.

    Empty values are accepted; the field is optional.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError(_("Phone number must be a string."))
    if not PHONE_REGEX.fullmatch(normalize_phone_number(value)):
        raise ValidationError(_("Phone number must contain 7 to 15 digits, optionally prefixed by '+'."))
    return None
