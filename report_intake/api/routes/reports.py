"""Report intake route."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from report_intake.models.report_model import ReportAck
from report_intake.services.report_service import ReportError, log_report, read_report

router = APIRouter()


@router.post("/report", response_model=ReportAck)
async def receive_report(request: Request):
    """Accept any JSON value, print it with a timestamp, and acknowledge."""
    max_body_bytes = request.app.state.settings.max_body_bytes
    try:
        report = await read_report(request, max_body_bytes)
    except ReportError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)

    log_report(report)
    return ReportAck()
