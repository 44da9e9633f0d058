"""Report models (optional typing layer)."""

from __future__ import annotations

from pydantic import BaseModel


class ReportAck(BaseModel):
    message: str = "Report received"
