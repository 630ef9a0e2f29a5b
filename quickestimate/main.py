from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from quickestimate.api.middleware import RequestLogMiddleware
from quickestimate.api.v1.router import v1_router
from quickestimate.common.logging import get_logger, setup_logging
from quickestimate.config import settings
from quickestimate.db.session import engine, init_db
from quickestimate.integrations.sendgrid import EmailClient
from quickestimate.integrations.storage import StorageClient, resolve_backend, uploads_dir

VERSION = "1.0.0"

logger = get_logger("app")


def _cors_origins() -> list[str]:
    if settings.ALLOWED_ORIGINS.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in settings.ALLOWED_ORIGINS.split(",") if origin.strip()]


async def check_integrations() -> dict[str, bool]:
    """Run every integration health check; failures are logged, never fatal."""
    results = {}
    for client in (StorageClient(), EmailClient()):
        results[client.name] = await client.health_check()
        if not results[client.name]:
            logger.warning("Integration %s failed its health check", client.name)
    return results


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await check_integrations()
    await init_db()
    logger.info("Quick Estimate %s started (env=%s)", VERSION, settings.APP_ENV)
    yield
    await engine.dispose()


app = FastAPI(
    title="Quick Estimate API",
    description="Instant project price ranges, lead capture and an operator admin area",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLogMiddleware)

# Photos written by the local storage backend
app.mount("/uploads", StaticFiles(directory=uploads_dir(), check_dir=False), name="uploads")

app.include_router(v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "quickestimate",
        "version": VERSION,
        "env": settings.APP_ENV,
        "database": engine.dialect.name,
        "storage": resolve_backend().value,
    }
