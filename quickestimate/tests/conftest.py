import uuid
from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from quickestimate.core.auth.service import cookie_name, create_admin_session
from quickestimate.core.estimator.defaults import DEFAULT_SETTINGS
from quickestimate.core.estimator.engine import calculate_estimate
from quickestimate.core.estimator.schemas import EstimateInputs
from quickestimate.db.base import Base
from quickestimate.db.models import *  # noqa: F401,F403 - ensure all models loaded

# In-memory SQLite, one fresh database per test
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_session):
    from quickestimate.api.deps import get_db
    from quickestimate.main import app

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def fence_inputs() -> EstimateInputs:
    return EstimateInputs.model_validate(
        {
            "project_type": "Fence",
            "dimensions": {"linear_feet": 100, "height_feet": 6},
            "access": "standard",
            "demo_haul_off": "standard",
            "slope": "standard",
            "notes": "Replace the back fence",
        }
    )


@pytest.fixture
def fence_estimate(fence_inputs):
    return calculate_estimate(fence_inputs, DEFAULT_SETTINGS)


@pytest.fixture
async def admin_headers(db_session):
    session = await create_admin_session(db_session)
    return {"Cookie": f"{cookie_name()}={session.token}"}


@pytest.fixture
def make_lead(db_session, fence_inputs, fence_estimate):
    from quickestimate.db.models.lead import Lead

    async def _make(**overrides):
        values = {
            "id": uuid.uuid4(),
            "name": "Jane Smith",
            "phone": "555-123-4567",
            "email": "jane@steelheadbuilds.com",
            "zip": "97201",
            "project_type": "Fence",
            "photos": [],
            "inputs": fence_inputs.model_dump(mode="json"),
            "estimate": fence_estimate.model_dump(mode="json"),
            "created_at": datetime.now(timezone.utc),
        }
        values.update(overrides)
        lead = Lead(**values)
        db_session.add(lead)
        await db_session.flush()
        return lead

    return _make


@pytest.fixture(autouse=True)
def mock_celery_tasks():
    """Mock Celery task.delay() calls to prevent actual task execution in tests."""
    with patch("quickestimate.tasks.notification_tasks.send_lead_notification.delay") as delay:
        yield delay
