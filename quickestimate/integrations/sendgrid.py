"""SendGrid email integration client.

Uses the real SendGrid API when a valid key is configured, otherwise
falls back to logging-only mock mode.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

import httpx

from quickestimate.config import settings
from quickestimate.integrations.base import BaseIntegration


def _is_mock() -> bool:
    return settings.SENDGRID_API_KEY.startswith("mock_")


class EmailClient(BaseIntegration):
    """Plain-text email client with real SendGrid API and mock fallback."""

    SENDGRID_URL = "https://api.sendgrid.com/v3"

    def __init__(self) -> None:
        super().__init__("sendgrid")

    async def health_check(self) -> bool:
        if _is_mock():
            self.logger.info("SendGrid health check: OK (mock)")
            return True
        try:
            async with httpx.AsyncClient(timeout=10) as client:
                resp = await client.get(
                    f"{self.SENDGRID_URL}/scopes",
                    headers={"Authorization": f"Bearer {settings.SENDGRID_API_KEY}"},
                )
                return resp.status_code == 200
        except httpx.HTTPError as e:
            self.logger.error("SendGrid health check failed: %s", e)
            return False

    async def send_text(
        self, to: str, from_email: str, subject: str, body: str,
    ) -> dict[str, Any]:
        message_id = str(uuid.uuid4())
        timestamp = datetime.now(timezone.utc).isoformat()

        if _is_mock():
            self.logger.info("Mock email | from=%s | to=%s | subject='%s'", from_email, to, subject)
            return {"status": "sent", "message_id": message_id, "to": to, "subject": subject, "timestamp": timestamp}

        payload = {
            "personalizations": [{"to": [{"email": to}]}],
            "from": {"email": from_email},
            "subject": subject,
            "content": [{"type": "text/plain", "value": body}],
        }
        self.logger.info("Sending email to=%s subject='%s'", to, subject)
        async with httpx.AsyncClient(timeout=30) as client:
            resp = await client.post(
                f"{self.SENDGRID_URL}/mail/send",
                headers={
                    "Authorization": f"Bearer {settings.SENDGRID_API_KEY}",
                    "Content-Type": "application/json",
                },
                json=payload,
            )
            resp.raise_for_status()
        sg_id = resp.headers.get("X-Message-Id", message_id)
        self.logger.info("Email sent via SendGrid: %s", sg_id)
        return {"status": "sent", "message_id": sg_id, "to": to, "subject": subject, "timestamp": timestamp}
