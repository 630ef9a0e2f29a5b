from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./quickestimate.sqlite"

    # Redis (Celery broker for lead notifications)
    REDIS_URL: str = "redis://localhost:6379/0"

    # Admin auth
    ADMIN_PASSWORD_HASH: str = ""
    ADMIN_PASSWORD: str = ""
    AUTH_COOKIE_NAME: str = "quickestimate_admin"
    ADMIN_SESSION_HOURS: str = "12"
    ALLOWED_ORIGINS: str = "*"

    # Photo storage: "auto", "local" or "inline"
    STORAGE_BACKEND: str = "auto"
    STORAGE_LOCAL_PATH: str = "./public"
    MAX_PHOTOS: int = 6
    MAX_PHOTO_BYTES: int = 5 * 1024 * 1024

    # SendGrid
    SENDGRID_API_KEY: str = "mock_sendgrid_key"
    NOTIFY_EMAIL_TO: str = ""
    NOTIFY_EMAIL_FROM: str = ""

    # App
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    @property
    def uses_postgres(self) -> bool:
        return self.DATABASE_URL.startswith("postgresql")


settings = Settings()
