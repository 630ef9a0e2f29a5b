import time

import pytest
from sqlalchemy import select

from quickestimate.common.security import (
    create_password_hash,
    generate_session_token,
    hash_session_token,
    verify_password_hash,
    verify_plain_password,
)
from quickestimate.config import settings
from quickestimate.core.auth.service import (
    create_admin_session,
    invalidate_admin_session,
    is_admin_auth_configured,
    is_admin_session_valid,
    session_hours,
    verify_admin_password,
)
from quickestimate.db.models.admin_session import AdminSession
from quickestimate.scripts.hash_admin_password import main as hash_admin_password


def test_password_hash_round_trip():
    hashed = create_password_hash("correct horse")
    assert hashed.startswith("$2")
    assert verify_password_hash("correct horse", hashed)
    assert not verify_password_hash("battery staple", hashed)


def test_malformed_hash_does_not_verify():
    assert verify_password_hash("anything", "not-a-bcrypt-hash") is False


def test_plain_password_compare():
    assert verify_plain_password("letmein", "letmein")
    assert not verify_plain_password("letmein", "letmein ")


def test_session_tokens_are_random_and_hashed():
    first, second = generate_session_token(), generate_session_token()
    assert first != second
    digest = hash_session_token(first)
    assert len(digest) == 64
    assert digest == hash_session_token(first)
    assert first not in digest


@pytest.mark.parametrize(
    "hours,expected",
    [("12", 12), ("0.5", 0.5), ("0", 12), ("-3", 12), ("nan", 12), ("inf", 12), ("soon", 12), ("", 12)],
)
def test_session_hours(monkeypatch, hours, expected):
    monkeypatch.setattr(settings, "ADMIN_SESSION_HOURS", hours)
    assert session_hours() == expected


def test_admin_auth_configuration(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", "")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "")
    assert not is_admin_auth_configured()
    assert not verify_admin_password("")

    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "pw")
    assert is_admin_auth_configured()
    assert verify_admin_password("pw")


@pytest.mark.asyncio
async def test_admin_session_lifecycle(db_session):
    issued = await create_admin_session(db_session)
    assert issued.max_age == int(session_hours() * 3600)

    row = (await db_session.execute(select(AdminSession))).scalar_one()
    assert row.token_hash == hash_session_token(issued.token)
    assert await is_admin_session_valid(db_session, issued.token)

    await invalidate_admin_session(db_session, issued.token)
    assert not await is_admin_session_valid(db_session, issued.token)


@pytest.mark.asyncio
async def test_expired_session_is_rejected_and_pruned(db_session):
    token = generate_session_token()
    db_session.add(
        AdminSession(token_hash=hash_session_token(token), expires_at_unix=int(time.time()) - 1)
    )
    await db_session.flush()

    assert not await is_admin_session_valid(db_session, token)
    assert (await db_session.execute(select(AdminSession))).first() is None


@pytest.mark.asyncio
async def test_missing_token_is_invalid(db_session):
    assert not await is_admin_session_valid(db_session, None)
    assert not await is_admin_session_valid(db_session, "")


def test_hash_admin_password_script(capsys):
    assert hash_admin_password(["hunter22"]) == 0
    line = capsys.readouterr().out.strip()
    assert line.startswith("ADMIN_PASSWORD_HASH=")
    assert verify_password_hash("hunter22", line.split("=", 1)[1])


def test_hash_admin_password_script_usage(capsys):
    assert hash_admin_password([]) == 1
    assert "Usage" in capsys.readouterr().err
