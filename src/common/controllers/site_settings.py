import structlog
from ninja_extra import api_controller, route

from common.auth_base import AdminJWTAuth
from common.models import SiteSetting
from common.schema import SiteSettingsSchema, SiteSettingsUpdateSchema
from common.throttling import WriteThrottle

from .base import UserAwareController

logger = structlog.get_logger(__name__)


@api_controller("/admin/settings", auth=AdminJWTAuth(), tags=["Admin Settings"], throttle=WriteThrottle())
class SiteSettingsController(UserAwareController):
    @route.get("", url_name="get_site_settings", response=SiteSettingsSchema)
    def get_settings(self) -> SiteSettingsSchema:
        """Return every site setting (site name, logo, payment keys, contact details) as a flat mapping."""
        return SiteSettingsSchema(settings=SiteSetting.objects.as_dict())

    @route.post("", url_name="update_site_settings", response=SiteSettingsSchema)
    def update_settings(self, payload: SiteSettingsUpdateSchema) -> SiteSettingsSchema:
        """Upsert the given keys. Keys not present in the payload are left untouched."""
        values = SiteSetting.objects.upsert_many(payload.settings)
        logger.info("site_settings_updated", keys=sorted(payload.settings), user_id=str(self.user().id))
        return SiteSettingsSchema(settings=values)
