import asyncio
import uuid
from datetime import datetime, timezone
from typing import Any

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from quickestimate.common.logging import get_logger
from quickestimate.config import settings
from quickestimate.core.leads.notifications import notification_body, notification_subject
from quickestimate.core.leads.repository import LeadRepository
from quickestimate.integrations.sendgrid import EmailClient
from quickestimate.tasks.celery_app import app

logger = get_logger("tasks.notification")


def _run_async(coro):
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


async def notify_new_lead(
    lead_id: str, db: AsyncSession, client: EmailClient | None = None,
) -> dict[str, Any] | None:
    """E-mail the operator about a stored lead. Returns None when skipped."""
    to = settings.NOTIFY_EMAIL_TO
    sender = settings.NOTIFY_EMAIL_FROM
    if not to or not sender:
        logger.info("Lead notification skipped (notification email not configured) | lead=%s", lead_id)
        return None

    lead = await LeadRepository(db).get_by_id(uuid.UUID(lead_id))
    if lead is None:
        logger.warning("Lead notification skipped, lead %s not found", lead_id)
        return None

    client = client or EmailClient()
    return await client.send_text(
        to=to,
        from_email=sender,
        subject=notification_subject(lead),
        body=notification_body(lead, datetime.now(timezone.utc)),
    )


@app.task(
    name="quickestimate.tasks.notification_tasks.send_lead_notification",
    autoretry_for=(httpx.HTTPError,),
    retry_backoff=True,
    max_retries=3,
)
def send_lead_notification(lead_id: str):
    logger.info("Sending notification for lead %s", lead_id)

    async def _send():
        from quickestimate.db.session import async_session_factory

        async with async_session_factory() as db:
            return await notify_new_lead(lead_id, db)

    return _run_async(_send())
