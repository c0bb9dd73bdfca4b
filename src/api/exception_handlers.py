"""Exception handlers for the API."""

import traceback
import typing as t
from copy import deepcopy

import orjson
import structlog
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import HttpRequest
from ninja.responses import Response

from accounts.exceptions import ConflictError
from events.exceptions import NotFoundError, PersistenceError, ValidationFailed
from events.service.registration_gate import RegistrationClosedError

logger = structlog.get_logger(__name__)

SENSITIVE_KEYS = {"password", "password1", "password2", "token", "refresh", "access", "authorization", "cookie"}


def handle_general_exception(request: HttpRequest, exc: Exception | t.Type[Exception]) -> Response:
    """Handle an unexpected exception.

    The client only sees an opaque message; the details go to the log.
    """
    metadata = {
        "headers": obfuscate(dict(request.headers)),
        "method": request.method,
        "path": request.path,
        "GET": obfuscate(request.GET.dict()),
        "user": str(request.user) if getattr(request, "user", None) else None,
    }
    if request.method in ("POST", "PUT", "PATCH") and request.headers.get("Content-Type") == "application/json":
        try:
            metadata["json_payload"] = obfuscate(orjson.loads(request.body))
        except orjson.JSONDecodeError:  # pragma: no cover
            metadata["json_payload"] = None
    logger.exception("internal_server_error", **metadata)
    data = {"detail": "Internal Server Error."}
    if settings.DEBUG:  # pragma: no cover
        data["traceback"] = traceback.format_exc()
    return Response(status=500, data=data)


def handle_django_validation_error(request: HttpRequest, exc: ValidationError | t.Type[ValidationError]) -> Response:
    """Handle a model validation error raised by full_clean."""
    logger.info("validation_error", path=request.path)
    if hasattr(exc, "error_dict"):
        error_dict = exc.message_dict
    else:
        error_dict = {"__all__": exc.messages}
    return Response(status=400, data={"errors": error_dict})


def handle_validation_failed(request: HttpRequest, exc: ValidationFailed | t.Type[ValidationFailed]) -> Response:
    """Handle answers that violate an event's registration form."""
    return Response(status=400, data={"detail": str(exc), "field": exc.field, "errors": exc.errors})


def handle_registration_closed_error(
    request: HttpRequest, exc: RegistrationClosedError | t.Type[RegistrationClosedError]
) -> Response:
    """Handle a registration attempt on an event that does not accept registrations."""
    return Response(status=400, data=exc.eligibility.model_dump(mode="json"))


def handle_not_found_error(request: HttpRequest, exc: NotFoundError | t.Type[NotFoundError]) -> Response:
    """Handle a reference to a missing resource."""
    return Response(status=404, data={"detail": str(exc)})


def handle_conflict_error(request: HttpRequest, exc: ConflictError | t.Type[ConflictError]) -> Response:
    """Handle a uniqueness conflict."""
    return Response(status=409, data={"detail": str(exc)})


def handle_persistence_error(
    request: HttpRequest, exc: PersistenceError | DatabaseError | t.Type[Exception]
) -> Response:
    """Handle a failed write. Database details are never exposed."""
    logger.error("persistence_error", path=request.path, error=str(exc))
    return Response(status=500, data={"detail": "Internal Server Error."})


def obfuscate(data: t.Any) -> t.Any:
    """Obfuscate sensitive data in payloads and headers."""
    if not isinstance(data, dict):
        return data
    new_data = deepcopy(data)
    for key in data.keys():
        if isinstance(key, str) and key.lower() in SENSITIVE_KEYS:
            new_data[key] = "********"
    return new_data
