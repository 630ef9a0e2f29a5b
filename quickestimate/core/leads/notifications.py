"""Plain-text e-mail sent to the operator when a new lead arrives."""

from __future__ import annotations

from datetime import datetime

from quickestimate.core.leads.export import photo_labels
from quickestimate.db.models.lead import Lead


def notification_subject(lead: Lead) -> str:
    return f"New Quick Estimate lead #{lead.id}"


def notification_body(lead: Lead, sent_at: datetime) -> str:
    estimate = lead.estimate or {}
    inputs = lead.inputs or {}
    photos = photo_labels(lead.photos or [])
    low = float(estimate.get("low_estimate", 0))
    high = float(estimate.get("high_estimate", 0))

    return "\n".join(
        [
            f"Lead ID: {lead.id}",
            f"Created: {sent_at.isoformat()}",
            f"Name: {lead.name}",
            f"Phone: {lead.phone}",
            f"Email: {lead.email}",
            f"ZIP: {lead.zip}",
            f"Project Type: {lead.project_type}",
            f"Estimate Range: ${low:.0f} - ${high:.0f}",
            f"Photos: {', '.join(photos) if photos else 'None'}",
            f"Notes: {inputs.get('notes') or 'None'}",
        ]
    )
