"""Public lead capture: contact details, the estimate shown, optional photos."""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from quickestimate.api.deps import get_db
from quickestimate.common.exceptions import BadRequestError
from quickestimate.common.logging import get_logger
from quickestimate.config import settings
from quickestimate.core.estimator.schemas import EstimateInputs
from quickestimate.core.leads.repository import LeadRepository
from quickestimate.core.leads.schemas import LeadCreatedResponse, LeadSubmission
from quickestimate.integrations.storage import StorageClient, photo_too_large_message
from quickestimate.tasks.notification_tasks import send_lead_notification

logger = get_logger("api.leads")

router = APIRouter(prefix="/leads", tags=["Leads"])


def _errors(exc: ValidationError) -> list[dict]:
    return json.loads(exc.json(include_url=False))


def _parse_json(raw: str) -> object:
    try:
        return json.loads(raw or "{}")
    except json.JSONDecodeError:
        raise BadRequestError("Invalid lead payload")


@router.post("", response_model=LeadCreatedResponse, status_code=201)
async def create_lead(
    name: str = Form(""),
    phone: str = Form(""),
    email: str = Form(""),
    zip: str = Form(""),
    inputs: str = Form("{}"),
    estimate: str = Form("{}"),
    photos: list[UploadFile] | None = File(None),
    db: AsyncSession = Depends(get_db),
):
    try:
        parsed_inputs = EstimateInputs.model_validate(_parse_json(inputs))
    except ValidationError as e:
        raise BadRequestError("Invalid estimate payload", _errors(e))

    uploads = [p for p in photos or [] if p.size]
    if len(uploads) > settings.MAX_PHOTOS:
        raise BadRequestError(f"Maximum {settings.MAX_PHOTOS} photos allowed per lead")
    for upload in uploads:
        if upload.size > settings.MAX_PHOTO_BYTES:
            raise BadRequestError(photo_too_large_message(upload.filename))

    try:
        submission = LeadSubmission.model_validate(
            {
                "name": name,
                "phone": phone,
                "email": email,
                "zip": zip,
                "photos": [],
                "inputs": parsed_inputs,
                "estimate": _parse_json(estimate),
            }
        )
    except ValidationError as e:
        raise BadRequestError("Invalid lead payload", _errors(e))

    storage = StorageClient()
    references: list[str] = []
    try:
        for upload in uploads:
            content = await upload.read()
            if not content:
                continue
            references.append(
                await storage.store_photo(content, upload.filename, upload.content_type)
            )

        submission = submission.model_copy(update={"photos": references})
        lead_id = await LeadRepository(db).create(submission)
        await db.commit()
    except Exception:
        # No lead points at these photos
        for reference in references:
            await storage.delete_photo(reference)
        raise

    try:
        send_lead_notification.delay(str(lead_id))
    except Exception as e:
        logger.warning("Lead %s stored but notification could not be queued: %s", lead_id, e)

    return LeadCreatedResponse(lead_id=lead_id)
