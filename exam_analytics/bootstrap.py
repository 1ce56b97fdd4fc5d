"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging

from fastapi import FastAPI
from sqlalchemy import Engine

from exam_analytics.adapters import (
    ChainedExamRecordSource,
    ExamRecordSourcePort,
    FileExamRecordSource,
    StaticExamRecordSource,
)
from exam_analytics.analytics import ANALYTICS_MONTH_LABELS, ExamAnalyticsService
from exam_analytics.api import create_api_application
from exam_analytics.config import AppSettings, config_load_settings
from exam_analytics.db import SQLAlchemyDatabaseHealthService, SQLAlchemyExamRecordSource, db_create_engine

logger = logging.getLogger(__name__)


def bootstrap_create_application() -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    settings = config_load_settings()
    engine = db_create_engine(database_url=settings.database_url)
    return create_api_application(
        settings=settings,
        db_health_service=SQLAlchemyDatabaseHealthService(engine=engine),
        analytics_service=bootstrap_create_analytics_service(settings=settings, engine=engine),
    )


def bootstrap_create_analytics_service(settings: AppSettings, engine: Engine | None = None) -> ExamAnalyticsService:
    """Build the analytics service with its configured record source chain.

    Args:
        settings: Validated runtime settings.
        engine: Optional shared SQLAlchemy engine, created from settings when omitted.

    Returns:
        ExamAnalyticsService: Analytics service instance.

    Raises:
        ValueError: Raised when settings values cannot build the chain.
    """

    return ExamAnalyticsService(
        record_loader=ChainedExamRecordSource(bootstrap_create_record_sources(settings=settings, engine=engine)),
        report_timezone=settings.report_timezone,
        ranking_limit=settings.ranking_limit,
        timeline_employer_limit=settings.timeline_employer_limit,
        month_labels=ANALYTICS_MONTH_LABELS[settings.month_label_language],
        absence_marker=settings.absence_marker,
    )


def bootstrap_create_record_sources(settings: AppSettings, engine: Engine | None = None) -> list[ExamRecordSourcePort]:
    """Build record sources in the configured fallback order.

    A `file` entry without a configured file path is skipped.

    Args:
        settings: Validated runtime settings.
        engine: Optional shared SQLAlchemy engine.

    Returns:
        list[ExamRecordSourcePort]: Record sources in fallback order.

    Raises:
        ValueError: Raised when the configured file path has an unsupported suffix.
    """

    sources: list[ExamRecordSourcePort] = []
    for source_kind in settings.config_source_kinds():
        if source_kind == "database":
            sources.append(SQLAlchemyExamRecordSource(engine=engine or db_create_engine(settings.database_url)))
        elif source_kind == "file":
            if settings.exam_source_file_path is None:
                logger.info("file exam source skipped: EXAM_SOURCE_FILE_PATH is not set")
                continue
            sources.append(FileExamRecordSource(settings.exam_source_file_path))
        elif source_kind == "mock":
            sources.append(StaticExamRecordSource(name="mock"))
    return sources
