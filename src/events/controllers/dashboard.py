# src/events/controllers/dashboard.py
from ninja_extra import api_controller, route

from common.auth_base import AdminJWTAuth
from common.controllers import UserAwareController
from events import schema
from events.service import event_service


@api_controller("/admin/stats", auth=AdminJWTAuth(), tags=["Admin Dashboard"])
class DashboardController(UserAwareController):
    @route.get("", url_name="admin_stats", response=schema.DashboardStatsSchema)
    def stats(self) -> schema.DashboardStatsSchema:
        """Headline counts for the admin dashboard: users, events, upcoming events and registrations."""
        return event_service.dashboard_stats()
