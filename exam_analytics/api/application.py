"""FastAPI application factory for the exam analytics service.

This module defines API application composition used by the runtime.
"""

from fastapi import FastAPI

from exam_analytics.analytics import AnalyticsPort
from exam_analytics.config import AppSettings
from exam_analytics.db import DatabaseHealthPort

from .routers import api_create_dashboard_router, api_create_health_router


def create_api_application(
    settings: AppSettings,
    db_health_service: DatabaseHealthPort,
    analytics_service: AnalyticsPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        db_health_service: Database health service used by health endpoints.
        analytics_service: Analytics service used by dashboard endpoints.

    Returns:
        FastAPI: Framework application instance.

    Raises:
        ValueError: Raised when a router dependency is invalid.
    """
    application = FastAPI(title="Occupational Exam Analytics")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal service descriptor for bootstrap verification.

        Returns:
            dict[str, str]: Service name, status and environment.
        """

        return {
            "service": "occupational-exam-analytics",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(db_health_service=db_health_service))
    application.include_router(api_create_dashboard_router(analytics_service=analytics_service))

    return application
