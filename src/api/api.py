from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import HttpRequest
from ninja_extra import NinjaExtraAPI

from accounts.controllers.auth import AuthController
from accounts.controllers.users_admin import UserAdminController
from accounts.exceptions import ConflictError
from books.controllers.books import BookController
from books.controllers.books_admin import BookAdminController
from common.controllers import SiteSettingsController
from common.schema import ResponseOk, VersionResponse
from common.throttling import AnonDefaultThrottle, UserDefaultThrottle
from events.controllers.dashboard import DashboardController
from events.controllers.event_admin import EVENT_ADMIN_CONTROLLERS
from events.controllers.events import EventController
from events.exceptions import NotFoundError, PersistenceError, ValidationFailed
from events.service.registration_gate import RegistrationClosedError

from .exception_handlers import (
    handle_conflict_error,
    handle_django_validation_error,
    handle_general_exception,
    handle_not_found_error,
    handle_persistence_error,
    handle_registration_closed_error,
    handle_validation_failed,
)

api = NinjaExtraAPI(
    title="Lumina Backend API",
    docs_url="/docs",
    version=settings.VERSION,
    description=f"Lumina book club API {settings.VERSION}",
    app_name=f"lumina-api-{settings.VERSION}",
    urls_namespace="api",
    servers=[
        {"url": settings.SERVICE_URL, "description": settings.SERVICE_DESCRIPTION},
    ],
    throttle=[AnonDefaultThrottle(), UserDefaultThrottle()],
)


@api.get("/version", tags=["Version"], response={200: VersionResponse})
def version(request: HttpRequest) -> tuple[int, VersionResponse]:
    """Get the API version."""
    return 200, VersionResponse(version=settings.VERSION)


@api.get("/healthcheck", tags=["Healthcheck"], response={200: ResponseOk})
def healthcheck(request: HttpRequest) -> tuple[int, ResponseOk]:
    """Check the health of the API."""
    return 200, ResponseOk()


api.register_controllers(
    # Auth/Account controllers
    AuthController,
    UserAdminController,
    # Event controllers
    EventController,
    *EVENT_ADMIN_CONTROLLERS,
    DashboardController,
    # Book controllers
    BookController,
    BookAdminController,
    # Common controllers
    SiteSettingsController,
)

EXCEPTION_HANDLERS = {
    Exception: handle_general_exception,
    ValidationError: handle_django_validation_error,
    ValidationFailed: handle_validation_failed,
    RegistrationClosedError: handle_registration_closed_error,
    NotFoundError: handle_not_found_error,
    ConflictError: handle_conflict_error,
    PersistenceError: handle_persistence_error,
    DatabaseError: handle_persistence_error,
}

for exc, handler in EXCEPTION_HANDLERS.items():
    api.add_exception_handler(exc, handler)
