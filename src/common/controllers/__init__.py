from .base import UserAwareController
from .site_settings import SiteSettingsController

__all__ = ["SiteSettingsController", "UserAwareController"]
