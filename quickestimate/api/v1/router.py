from fastapi import APIRouter

from quickestimate.api.v1.admin import router as admin_router
from quickestimate.api.v1.estimate import router as estimate_router
from quickestimate.api.v1.leads import router as leads_router

v1_router = APIRouter()

v1_router.include_router(estimate_router)
v1_router.include_router(leads_router)
v1_router.include_router(admin_router)
