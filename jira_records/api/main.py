from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.config import Settings, get_settings
from ..core.errors import install_exception_handlers
from ..core.logging import configure_logging, install_request_logging
from ..models.common import HealthResponse
from .routes.jira import router as jira_router


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the decoder service: health check plus the /api/v1/jira decode and search routes."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Decodes Jira search responses into typed records",
        version="1.0.0",
        openapi_tags=[
            {"name": "JIRA", "description": "Decode and search Jira issues"},
            {"name": "Health", "description": "Health and diagnostics"},
        ],
    )
    if settings.ALLOW_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.ALLOW_ORIGINS,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )
    install_request_logging(app)
    install_exception_handlers(app)

    @app.get("/", tags=["Health"], summary="Health Check", response_model=HealthResponse)
    def health_check() -> HealthResponse:
        return HealthResponse(status="ok", app=settings.APP_NAME, environment=settings.APP_ENV)

    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(jira_router)
    app.include_router(api_v1)
    return app


app = create_app()
