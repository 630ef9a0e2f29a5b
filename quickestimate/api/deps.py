from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from quickestimate.common.exceptions import UnauthorizedError
from quickestimate.core.auth.service import cookie_name, is_admin_session_valid
from quickestimate.core.estimator.schemas import EstimateSettings
from quickestimate.core.estimator.settings_store import SettingsStore
from quickestimate.db.session import async_session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_estimate_settings(db: AsyncSession = Depends(get_db)) -> EstimateSettings:
    return await SettingsStore(db).get()


async def require_admin(request: Request, db: AsyncSession = Depends(get_db)) -> None:
    token = request.cookies.get(cookie_name())
    if not await is_admin_session_valid(db, token):
        raise UnauthorizedError()
