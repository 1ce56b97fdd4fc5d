"""Dashboard API router composition for exam absence analytics reads."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from exam_analytics.analytics import (
    AnalyticsPort,
    analytics_serialize_snapshot_legacy,
    analytics_serialize_snapshot_result,
)

logger = logging.getLogger(__name__)


def api_create_dashboard_router(analytics_service: AnalyticsPort) -> APIRouter:
    """Create dashboard router exposing analytics snapshot endpoints.

    Args:
        analytics_service: Analytics service computing snapshots.

    Returns:
        APIRouter: Router exposing `/api/dashboard` endpoints.

    Raises:
        ValueError: Raised when analytics_service is invalid.
    """

    if analytics_service is None:
        raise ValueError("analytics_service must not be None")

    router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

    @router.get("")
    def api_dashboard_snapshot(year: int | None = Query(default=None, ge=1900, le=9999)) -> JSONResponse:
        """Return the analytics snapshot for the current or requested year.

        Args:
            year: Optional calendar year charted in the monthly series.

        Returns:
            JSONResponse: Snapshot payload, or error envelope on processing failure.

        Raises:
            RuntimeError: This handler converts processing failures to HTTP 500.
        """

        try:
            result = analytics_service.analytics_snapshot_build(reference_date=_api_reference_date(year))
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("dashboard snapshot processing failed")
            return _api_dashboard_error_response()
        return JSONResponse(content=analytics_serialize_snapshot_result(result), status_code=status.HTTP_200_OK)

    @router.get("/legacy")
    def api_dashboard_snapshot_legacy(year: int | None = Query(default=None, ge=1900, le=9999)) -> JSONResponse:
        """Return the analytics snapshot in the Portuguese-keyed chart payload.

        Args:
            year: Optional calendar year charted in the monthly series.

        Returns:
            JSONResponse: Legacy snapshot payload, or error envelope on processing failure.

        Raises:
            RuntimeError: This handler converts processing failures to HTTP 500.
        """

        try:
            result = analytics_service.analytics_snapshot_build(reference_date=_api_reference_date(year))
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("legacy dashboard snapshot processing failed")
            return _api_dashboard_error_response()
        return JSONResponse(content=analytics_serialize_snapshot_legacy(result.snapshot), status_code=status.HTTP_200_OK)

    return router


def _api_reference_date(year: int | None) -> date | None:
    if year is None:
        return None
    return date(year, 1, 1)


def _api_dashboard_error_response() -> JSONResponse:
    payload = {
        "status": "error",
        "code": "DASHBOARD_PROCESSING_FAILED",
        "message": "dashboard data could not be processed",
    }
    return JSONResponse(content=payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


__all__ = ["api_create_dashboard_router"]
