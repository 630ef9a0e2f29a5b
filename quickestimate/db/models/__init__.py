from quickestimate.db.models.admin_session import AdminSession
from quickestimate.db.models.lead import Lead
from quickestimate.db.models.setting import ESTIMATE_SETTINGS_KEY, AppSetting

__all__ = [
    "ESTIMATE_SETTINGS_KEY",
    "AdminSession",
    "AppSetting",
    "Lead",
]
