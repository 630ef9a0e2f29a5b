"""Admin password checks and cookie-session bookkeeping.

There is a single operator account, configured through ``ADMIN_PASSWORD_HASH``
(preferred) or ``ADMIN_PASSWORD``.  A successful login issues a random token
for the cookie; only its SHA-256 digest is kept in ``admin_sessions``.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from quickestimate.common.logging import get_logger
from quickestimate.common.security import (
    generate_session_token,
    hash_session_token,
    verify_password_hash,
    verify_plain_password,
)
from quickestimate.config import settings
from quickestimate.db.models.admin_session import AdminSession

logger = get_logger("auth")

DEFAULT_SESSION_HOURS = 12.0


@dataclass(frozen=True)
class IssuedSession:
    token: str
    max_age: int


def _now_unix() -> int:
    return int(time.time())


def session_hours() -> float:
    try:
        hours = float(settings.ADMIN_SESSION_HOURS)
    except (TypeError, ValueError):
        return DEFAULT_SESSION_HOURS
    if not math.isfinite(hours) or hours <= 0:
        return DEFAULT_SESSION_HOURS
    return hours


def cookie_name() -> str:
    return settings.AUTH_COOKIE_NAME or "quickestimate_admin"


def is_admin_auth_configured() -> bool:
    return bool(settings.ADMIN_PASSWORD_HASH or settings.ADMIN_PASSWORD)


def verify_admin_password(password: str) -> bool:
    if settings.ADMIN_PASSWORD_HASH:
        return verify_password_hash(password, settings.ADMIN_PASSWORD_HASH)
    if settings.ADMIN_PASSWORD:
        return verify_plain_password(password, settings.ADMIN_PASSWORD)
    return False


async def prune_expired_sessions(db: AsyncSession) -> None:
    await db.execute(delete(AdminSession).where(AdminSession.expires_at_unix <= _now_unix()))


async def create_admin_session(db: AsyncSession) -> IssuedSession:
    max_age = int(session_hours() * 60 * 60)
    token = generate_session_token()

    await prune_expired_sessions(db)
    db.add(AdminSession(token_hash=hash_session_token(token), expires_at_unix=_now_unix() + max_age))
    await db.flush()
    logger.info("Admin session created (ttl=%ds)", max_age)
    return IssuedSession(token=token, max_age=max_age)


async def invalidate_admin_session(db: AsyncSession, token: str | None) -> None:
    if not token:
        return
    await db.execute(delete(AdminSession).where(AdminSession.token_hash == hash_session_token(token)))
    logger.info("Admin session invalidated")


async def is_admin_session_valid(db: AsyncSession, token: str | None) -> bool:
    if not token:
        return False
    await prune_expired_sessions(db)
    result = await db.execute(
        select(AdminSession.token_hash).where(
            AdminSession.token_hash == hash_session_token(token),
            AdminSession.expires_at_unix > _now_unix(),
        )
    )
    return result.first() is not None
