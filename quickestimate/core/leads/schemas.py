from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from quickestimate.core.estimator.schemas import EstimateInputs, EstimateResult


class LeadSubmission(BaseModel):
    """Everything captured when a visitor asks to be contacted."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=200)
    phone: str = Field(min_length=7, max_length=30)
    email: EmailStr
    zip: str = Field(min_length=5, max_length=10)
    photos: list[str] = Field(default_factory=list)
    inputs: EstimateInputs
    estimate: EstimateResult


class LeadCreatedResponse(BaseModel):
    lead_id: uuid.UUID


class LeadListItem(BaseModel):
    id: uuid.UUID
    created_at: str
    name: str
    phone: str
    email: str
    zip: str
    project_type: str


class LeadDetail(LeadListItem):
    photos: list[str]
    inputs: dict
    estimate: dict
