"""
Report Intake Mock Server — FastAPI Main Application
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from report_intake.api.router import api_router
from report_intake.core.config import Settings, settings as default_settings


def create_app(settings: Settings = default_settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        print(f"Mock server listening on all network interfaces at http://localhost:{settings.port}", flush=True)
        yield
        print("Shutting down...")

    app = FastAPI(
        title=settings.app_name,
        description="Accepts JSON reports on POST /report and prints them to stdout",
        version=settings.version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_allow_origins],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(api_router)

    # Store settings on app state
    app.state.settings = settings

    return app


app = create_app()
