from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from quickestimate.common.logging import get_logger
from quickestimate.config import settings
from quickestimate.db.base import Base

logger = get_logger("db")

engine = create_async_engine(settings.DATABASE_URL, echo=False, pool_pre_ping=True)
async_session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db() -> None:
    """Create missing tables and seed the default pricing settings."""
    from quickestimate.core.estimator.settings_store import SettingsStore
    from quickestimate.db import models  # noqa: F401 - register tables on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        seeded = await SettingsStore(session).ensure_seeded()
        await session.commit()

    logger.info("Database ready (%s, settings seeded=%s)", engine.dialect.name, seeded)
