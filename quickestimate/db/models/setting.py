from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from quickestimate.db.base import Base, JSONType

ESTIMATE_SETTINGS_KEY = "estimate_settings"


class AppSetting(Base):
    __tablename__ = "app_settings"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[dict] = mapped_column(JSONType, nullable=False)
