import typing as t
from uuid import UUID

from django.db.models import QuerySet

from common.controllers import UserAwareController
from events import models


class EventAdminBaseController(UserAwareController):
    """Base controller for event admin endpoints.

    Subclasses should be decorated with @api_controller to register routes.
    """

    def get_queryset(self) -> QuerySet[models.Event]:
        """Every event, regardless of status."""
        return models.Event.objects.all()

    def get_one(self, event_id: UUID) -> models.Event:
        """Wrapper helper."""
        return t.cast(models.Event, self.get_object_or_exception(self.get_queryset(), pk=event_id))
