import uuid
from datetime import datetime, timedelta, timezone

import pytest

from quickestimate.common.security import create_password_hash
from quickestimate.config import settings
from quickestimate.core.auth.service import cookie_name
from quickestimate.core.estimator.defaults import DEFAULT_SETTINGS


def _session_cookie(response) -> str:
    header = response.headers["set-cookie"]
    name, _, value = header.split(";", 1)[0].partition("=")
    assert name == cookie_name()
    return value


@pytest.mark.asyncio
async def test_login_with_plain_password(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", "")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "letmein")

    response = await client.post("/api/v1/admin/login", json={"password": "letmein"})
    assert response.status_code == 200
    assert response.json() == {"ok": True}

    header = response.headers["set-cookie"].lower()
    assert "httponly" in header
    assert "samesite=lax" in header
    assert "max-age=43200" in header


@pytest.mark.asyncio
async def test_login_with_password_hash(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", create_password_hash("s3cret"))
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "ignored")

    response = await client.post("/api/v1/admin/login", json={"password": "s3cret"})
    assert response.status_code == 200

    response = await client.post("/api/v1/admin/login", json={"password": "ignored"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_wrong_password(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", "")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "letmein")

    response = await client.post("/api/v1/admin/login", json={"password": "nope"})
    assert response.status_code == 401
    assert "set-cookie" not in response.headers


@pytest.mark.asyncio
async def test_login_not_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", "")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "")

    response = await client.post("/api/v1/admin/login", json={"password": "anything"})
    assert response.status_code == 500
    assert "ADMIN_PASSWORD_HASH" in response.json()["detail"]


@pytest.mark.asyncio
async def test_login_then_logout(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", "")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "letmein")

    login = await client.post("/api/v1/admin/login", json={"password": "letmein"})
    headers = {"Cookie": f"{cookie_name()}={_session_cookie(login)}"}
    client.cookies.clear()

    response = await client.get("/api/v1/admin/settings", headers=headers)
    assert response.status_code == 200

    response = await client.post("/api/v1/admin/logout", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"ok": True}

    response = await client.get("/api/v1/admin/settings", headers=headers)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_logout_without_session(client):
    response = await client.get("/api/v1/admin/logout")
    assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/v1/admin/settings"),
        ("get", "/api/v1/admin/leads"),
        ("get", "/api/v1/admin/leads/export"),
        ("get", f"/api/v1/admin/leads/{uuid.uuid4()}"),
    ],
)
async def test_admin_routes_require_session(client, method, path):
    response = await client.request(method, path)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_admin_rejects_unknown_token(client):
    response = await client.get(
        "/api/v1/admin/settings", headers={"Cookie": f"{cookie_name()}=forged-token"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_settings(client, admin_headers):
    response = await client.get("/api/v1/admin/settings", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()["settings"]
    assert data["labor_rate_per_hour"] == 85
    assert data["project_configs"]["Fence"]["minimum_charge"] == 1200
    assert data["project_configs"]["Repair/Handyman"]["measurement"] == "hours_requested"


@pytest.mark.asyncio
async def test_replace_settings(client, admin_headers):
    payload = DEFAULT_SETTINGS.model_dump(mode="json", by_alias=True)
    payload["labor_rate_per_hour"] = 95
    payload["project_configs"]["Deck"]["unit_material_cost"] = 30

    response = await client.put("/api/v1/admin/settings", json=payload, headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"ok": True}

    response = await client.get("/api/v1/admin/settings", headers=admin_headers)
    assert response.json()["settings"] == payload


@pytest.mark.asyncio
async def test_replace_settings_rejects_invalid(client, admin_headers):
    payload = DEFAULT_SETTINGS.model_dump(mode="json", by_alias=True)
    payload["project_configs"]["Fence"]["measurement"] = "square_feet"

    response = await client.put("/api/v1/admin/settings", json=payload, headers=admin_headers)
    assert response.status_code == 422

    response = await client.get("/api/v1/admin/settings", headers=admin_headers)
    assert response.json()["settings"]["project_configs"]["Fence"]["measurement"] == "linear_feet"


@pytest.mark.asyncio
async def test_list_leads(client, admin_headers, make_lead):
    now = datetime.now(timezone.utc)
    await make_lead(name="First", created_at=now - timedelta(hours=2))
    await make_lead(name="Second", created_at=now - timedelta(hours=1))
    await make_lead(name="Third", created_at=now)

    response = await client.get(
        "/api/v1/admin/leads", params={"page": 1, "page_size": 2}, headers=admin_headers
    )
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert data["total_pages"] == 2
    assert [item["name"] for item in data["items"]] == ["Third", "Second"]
    assert set(data["items"][0]) == {
        "id", "created_at", "name", "phone", "email", "zip", "project_type",
    }

    response = await client.get(
        "/api/v1/admin/leads", params={"page": 2, "page_size": 2}, headers=admin_headers
    )
    assert [item["name"] for item in response.json()["items"]] == ["First"]


@pytest.mark.asyncio
async def test_get_lead(client, admin_headers, make_lead):
    lead = await make_lead(photos=["/uploads/1-a.jpg"])

    response = await client.get(f"/api/v1/admin/leads/{lead.id}", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(lead.id)
    assert data["photos"] == ["/uploads/1-a.jpg"]
    assert data["inputs"]["project_type"] == "Fence"
    assert data["estimate"]["low_estimate"] == pytest.approx(4965.75)


@pytest.mark.asyncio
async def test_get_lead_not_found(client, admin_headers):
    response = await client.get(f"/api/v1/admin/leads/{uuid.uuid4()}", headers=admin_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_export_leads(client, admin_headers, make_lead):
    await make_lead(photos=["data:image/png;base64,AAAA", "/uploads/2-b.jpg"])

    response = await client.get("/api/v1/admin/leads/export", headers=admin_headers)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="leads-' in response.headers["content-disposition"]

    lines = response.text.strip().split("\n")
    assert lines[0].startswith("id,created_at,name,phone,email,zip,project_type")
    assert len(lines) == 2
    assert "inline-photo-1 | /uploads/2-b.jpg" in lines[1]
    assert "Replace the back fence" in lines[1]
