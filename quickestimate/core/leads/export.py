"""CSV export of captured leads."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from datetime import date
from typing import Any

from quickestimate.db.models.lead import Lead

CSV_HEADERS = [
    "id",
    "created_at",
    "name",
    "phone",
    "email",
    "zip",
    "project_type",
    "estimate_low",
    "estimate_high",
    "materials_low",
    "materials_high",
    "labor_low",
    "labor_high",
    "notes",
    "photos",
]


def photo_labels(photos: Iterable[str]) -> list[str]:
    """Replace inline data URIs with short placeholders; keep URLs as-is."""
    return [
        f"inline-photo-{idx}" if photo.startswith("data:") else photo
        for idx, photo in enumerate(photos, start=1)
    ]


def _dig(data: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(data, dict):
            return ""
        data = data.get(key)
    return "" if data is None else data


def lead_row(lead: Lead) -> list[Any]:
    estimate = lead.estimate or {}
    inputs = lead.inputs or {}
    return [
        lead.id,
        lead.created_at.isoformat(),
        lead.name,
        lead.phone,
        lead.email,
        lead.zip,
        lead.project_type,
        _dig(estimate, "low_estimate"),
        _dig(estimate, "high_estimate"),
        _dig(estimate, "line_items", "materials", "low"),
        _dig(estimate, "line_items", "materials", "high"),
        _dig(estimate, "line_items", "labor", "low"),
        _dig(estimate, "line_items", "labor", "high"),
        _dig(inputs, "notes"),
        " | ".join(photo_labels(lead.photos or [])),
    ]


def build_leads_csv(leads: Iterable[Lead]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for lead in leads:
        writer.writerow(lead_row(lead))
    return buffer.getvalue()


def export_filename(today: date | None = None) -> str:
    day = today or date.today()
    return f"leads-{day.isoformat()}.csv"
