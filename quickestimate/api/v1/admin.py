import uuid

from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from quickestimate.api.deps import get_db, require_admin
from quickestimate.common.exceptions import ConfigurationError, NotFoundError, UnauthorizedError
from quickestimate.common.pagination import PaginatedResponse, PaginationParams, paginate
from quickestimate.config import settings as app_settings
from quickestimate.core.auth.service import (
    cookie_name,
    create_admin_session,
    invalidate_admin_session,
    is_admin_auth_configured,
    verify_admin_password,
)
from quickestimate.core.estimator.schemas import EstimateSettings
from quickestimate.core.estimator.settings_store import SettingsStore
from quickestimate.core.leads.export import build_leads_csv, export_filename
from quickestimate.core.leads.repository import (
    LeadRepository,
    newest_first,
    to_detail,
    to_list_item,
)
from quickestimate.core.leads.schemas import LeadDetail, LeadListItem

router = APIRouter(prefix="/admin", tags=["Admin"])


# ---------- Schemas ----------


class LoginRequest(BaseModel):
    password: str = Field(min_length=1)


class OkResponse(BaseModel):
    ok: bool = True


class SettingsResponse(BaseModel):
    settings: EstimateSettings


class LeadListResponse(PaginatedResponse[LeadListItem]):
    pass


# ---------- Session ----------


@router.post("/login", response_model=OkResponse)
async def login(body: LoginRequest, response: Response, db: AsyncSession = Depends(get_db)):
    if not is_admin_auth_configured():
        raise ConfigurationError(
            "Admin auth is not configured. Set ADMIN_PASSWORD_HASH (recommended) or ADMIN_PASSWORD."
        )
    if not verify_admin_password(body.password):
        raise UnauthorizedError("Invalid password")

    session = await create_admin_session(db)
    response.set_cookie(
        key=cookie_name(),
        value=session.token,
        httponly=True,
        samesite="lax",
        secure=app_settings.is_production,
        path="/",
        max_age=session.max_age,
    )
    return OkResponse()


@router.api_route("/logout", methods=["GET", "POST"], response_model=OkResponse)
async def logout(request: Request, response: Response, db: AsyncSession = Depends(get_db)):
    await invalidate_admin_session(db, request.cookies.get(cookie_name()))
    response.delete_cookie(cookie_name(), path="/")
    return OkResponse()


# ---------- Pricing settings ----------


@router.get("/settings", response_model=SettingsResponse, dependencies=[Depends(require_admin)])
async def get_settings(db: AsyncSession = Depends(get_db)):
    return SettingsResponse(settings=await SettingsStore(db).get())


@router.put("/settings", response_model=OkResponse, dependencies=[Depends(require_admin)])
async def replace_settings(body: EstimateSettings, db: AsyncSession = Depends(get_db)):
    await SettingsStore(db).replace(body)
    return OkResponse()


# ---------- Leads ----------


@router.get("/leads", response_model=LeadListResponse, dependencies=[Depends(require_admin)])
async def list_leads(
    db: AsyncSession = Depends(get_db),
    params: PaginationParams = Depends(),
):
    page = await paginate(db, newest_first(), params, to_list_item)
    return LeadListResponse(**page)


@router.get("/leads/export", dependencies=[Depends(require_admin)])
async def export_leads(db: AsyncSession = Depends(get_db)):
    leads = await LeadRepository(db).list_for_export()
    return Response(
        content=build_leads_csv(leads),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


@router.get("/leads/{lead_id}", response_model=LeadDetail, dependencies=[Depends(require_admin)])
async def get_lead(lead_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    lead = await LeadRepository(db).get_by_id(lead_id)
    if not lead:
        raise NotFoundError("Lead", str(lead_id))
    return to_detail(lead)
