"""API router composition.

The intake service exposes a single REST route at the application root.
"""

from fastapi import APIRouter

from report_intake.api.routes.reports import router as reports_router


api_router = APIRouter()

api_router.include_router(reports_router, tags=["reports"])
