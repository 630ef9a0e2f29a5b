"""Lead persistence.

The estimate is stored exactly as submitted; it is never recomputed from the
current settings, so a lead keeps the numbers the visitor saw.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from quickestimate.common.logging import get_logger
from quickestimate.core.leads.schemas import LeadDetail, LeadListItem, LeadSubmission
from quickestimate.db.models.lead import Lead

logger = get_logger("leads.repository")


def newest_first() -> Select:
    return select(Lead).order_by(Lead.created_at.desc())


def to_list_item(lead: Lead) -> LeadListItem:
    return LeadListItem(
        id=lead.id,
        created_at=lead.created_at.isoformat(),
        name=lead.name,
        phone=lead.phone,
        email=lead.email,
        zip=lead.zip,
        project_type=lead.project_type,
    )


def to_detail(lead: Lead) -> LeadDetail:
    return LeadDetail(
        **to_list_item(lead).model_dump(),
        photos=list(lead.photos or []),
        inputs=dict(lead.inputs or {}),
        estimate=dict(lead.estimate or {}),
    )


class LeadRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, submission: LeadSubmission) -> uuid.UUID:
        lead = Lead(
            name=submission.name,
            phone=submission.phone,
            email=str(submission.email),
            zip=submission.zip,
            project_type=submission.inputs.project_type.value,
            photos=list(submission.photos),
            inputs=submission.inputs.model_dump(mode="json"),
            estimate=submission.estimate.model_dump(mode="json"),
        )
        self.db.add(lead)
        await self.db.flush()
        logger.info("Lead created | id=%s | project_type=%s", lead.id, lead.project_type)
        return lead.id

    async def get_by_id(self, lead_id: uuid.UUID) -> Lead | None:
        result = await self.db.execute(select(Lead).where(Lead.id == lead_id))
        return result.scalar_one_or_none()

    async def list_leads(self, offset: int = 0, limit: int | None = None) -> list[Lead]:
        query = newest_first().offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def list_for_export(self) -> list[Lead]:
        """Every lead, newest first, with its stored inputs and estimate."""
        result = await self.db.execute(newest_first())
        return list(result.scalars().all())
