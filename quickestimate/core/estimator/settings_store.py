"""Persistent pricing settings.

A single JSON record in ``app_settings`` holds the whole ``EstimateSettings``
document.  ``replace`` overwrites it wholesale; there is no merge with the
previous value and no history.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quickestimate.common.logging import get_logger
from quickestimate.core.estimator.defaults import DEFAULT_SETTINGS
from quickestimate.core.estimator.schemas import EstimateSettings
from quickestimate.db.models.setting import ESTIMATE_SETTINGS_KEY, AppSetting

logger = get_logger("estimator.settings_store")


def _to_record(value: EstimateSettings) -> dict:
    return value.model_dump(mode="json", by_alias=True)


class SettingsStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _row(self) -> AppSetting | None:
        result = await self.db.execute(
            select(AppSetting).where(AppSetting.key == ESTIMATE_SETTINGS_KEY)
        )
        return result.scalar_one_or_none()

    async def ensure_seeded(self) -> bool:
        """Insert the default settings if no record exists yet. Returns True when seeded."""
        if await self._row() is not None:
            return False
        self.db.add(AppSetting(key=ESTIMATE_SETTINGS_KEY, value=_to_record(DEFAULT_SETTINGS)))
        await self.db.flush()
        logger.info("Seeded default estimate settings")
        return True

    async def get(self) -> EstimateSettings:
        row = await self._row()
        if row is None:
            await self.ensure_seeded()
            return DEFAULT_SETTINGS.model_copy(deep=True)
        return EstimateSettings.model_validate(row.value)

    async def replace(self, next_settings: EstimateSettings) -> None:
        row = await self._row()
        record = _to_record(next_settings)
        if row is None:
            self.db.add(AppSetting(key=ESTIMATE_SETTINGS_KEY, value=record))
        else:
            row.value = record
        await self.db.flush()
        logger.info(
            "Estimate settings replaced (labor_rate=%s, low=%s, high=%s)",
            next_settings.labor_rate_per_hour,
            next_settings.low_factor,
            next_settings.high_factor,
        )
