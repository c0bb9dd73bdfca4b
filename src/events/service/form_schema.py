"""Registration form schemas: storage codec and answer validation.

An event stores its form as an ordered JSON list of field definitions. Answers are
submitted keyed by field id (label keys are still accepted) and are stored keyed by
label, which is what administrators see.
"""

import typing as t
from collections.abc import Mapping, Sequence

import orjson
import structlog
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from events.exceptions import FormSchemaError, ValidationFailed
from events.schema.form import FormField, FormFieldType

logger = structlog.get_logger(__name__)

AnswerValue = str | bool

_FIELD_LIST_ADAPTER = TypeAdapter(list[FormField])
_MISSING = object()


def _loads(raw: str | bytes) -> t.Any:
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise FormSchemaError("Stored value is not valid JSON.") from e


def check_unique_fields(fields: Sequence[FormField]) -> None:
    """Field ids and labels must both be unique within a form.

    Raises:
        FormSchemaError: listing every duplicate.
    """
    messages: list[str] = []
    seen_ids: set[str] = set()
    seen_labels: set[str] = set()
    for field in fields:
        if field.id in seen_ids:
            messages.append(f"Duplicate field id '{field.id}'.")
        if field.label in seen_labels:
            messages.append(f"Duplicate field label '{field.label}'.")
        seen_ids.add(field.id)
        seen_labels.add(field.label)
    if messages:
        raise FormSchemaError(messages)


def parse_form_fields(raw: t.Any) -> list[FormField]:
    """Decode a stored form definition.

    Accepts the JSON list itself, its serialized text (older rows), or ``None``.
    A missing definition is an empty form.
    """
    if raw is None or raw == "" or raw == b"":
        return []
    if isinstance(raw, (str, bytes)):
        raw = _loads(raw)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise FormSchemaError("Form fields must be a list.")
    try:
        fields = _FIELD_LIST_ADAPTER.validate_python(raw)
    except PydanticValidationError as e:
        raise FormSchemaError(
            [f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()]
        ) from e
    check_unique_fields(fields)
    return fields


def dump_form_fields(fields: Sequence[FormField]) -> list[dict[str, t.Any]]:
    """Encode a form definition for storage, preserving order."""
    return [field.model_dump(mode="json", exclude_none=True) for field in fields]


def parse_form_responses(raw: t.Any) -> dict[str, AnswerValue]:
    """Decode stored answers. Missing answers are an empty mapping."""
    if raw is None or raw == "" or raw == b"":
        return {}
    if isinstance(raw, (str, bytes)):
        raw = _loads(raw)
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise FormSchemaError("Form responses must be an object.")
    return dict(raw)


def _lookup(field: FormField, answers: Mapping[str, t.Any]) -> t.Any:
    if field.id in answers:
        return answers[field.id]
    return answers.get(field.label, _MISSING)


def _check_checkbox(field: FormField, value: t.Any) -> tuple[str | None, bool | None]:
    if value is _MISSING or value is None:
        return ("This box must be checked." if field.required else None), None
    if not isinstance(value, bool):
        return "Must be true or false.", None
    if field.required and value is not True:
        return "This box must be checked.", None
    return None, value


def _check_text(field: FormField, value: t.Any) -> tuple[str | None, str | None]:
    if value is _MISSING or value is None:
        value = ""
    if not isinstance(value, str):
        return "Must be text.", None
    value = value.strip()
    if not value:
        return ("This field is required." if field.required else None), None
    if field.type == FormFieldType.SELECT and value not in (field.options or []):
        return f"Must be one of: {', '.join(field.options or [])}.", None
    if field.type == FormFieldType.EMAIL:
        try:
            validate_email(value)
        except DjangoValidationError:
            return "Enter a valid email address.", None
    return None, value


def validate_answers(fields: Sequence[FormField], answers: Mapping[str, t.Any] | None) -> dict[str, AnswerValue]:
    """Check submitted answers against a form and return them normalized.

    - required text, email, tel and select fields need a non-empty value (surrounding whitespace ignored);
    - a required checkbox must be ``true``;
    - select values must match one of the options exactly;
    - email values must be valid addresses;
    - unknown keys are dropped, and so are optional fields left empty.

    Returns:
        The answers keyed by field label, in form order.

    Raises:
        ValidationFailed: with every violated field; ``field`` names the first one.
    """
    answers = answers or {}
    normalized: dict[str, AnswerValue] = {}
    errors: dict[str, str] = {}

    for field in fields:
        value = _lookup(field, answers)
        error: str | None
        clean: AnswerValue | None
        if field.type == FormFieldType.CHECKBOX:
            error, clean = _check_checkbox(field, value)
        else:
            error, clean = _check_text(field, value)
        if error:
            errors[field.label] = error
        elif clean is not None:
            normalized[field.label] = clean

    if errors:
        first = next(iter(errors))
        logger.info("form_answers_rejected", fields=list(errors))
        raise ValidationFailed(f"Invalid answer for '{first}': {errors[first]}", field=first, errors=errors)
    return normalized
