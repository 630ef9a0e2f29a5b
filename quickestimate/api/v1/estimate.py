from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from quickestimate.api.deps import get_estimate_settings
from quickestimate.common.enums import ProjectType
from quickestimate.core.estimator.engine import calculate_estimate, get_required_fields
from quickestimate.core.estimator.schemas import (
    EstimateInputs,
    EstimateResult,
    EstimateSettings,
    RequiredFieldsResponse,
)

router = APIRouter(prefix="/estimate", tags=["Estimate"])


# ---------- Schemas ----------


class EstimateResponse(BaseModel):
    estimate: EstimateResult


# ---------- Endpoints ----------


@router.post("", response_model=EstimateResponse)
async def create_estimate(
    body: EstimateInputs,
    settings: EstimateSettings = Depends(get_estimate_settings),
):
    return EstimateResponse(estimate=calculate_estimate(body, settings))


@router.get("/required-fields", response_model=RequiredFieldsResponse)
async def required_fields(project_type: ProjectType = Query(...)):
    return RequiredFieldsResponse(
        project_type=project_type,
        required_fields=get_required_fields(project_type),
    )
