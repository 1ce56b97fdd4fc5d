"""Tests for bootstrap wiring of record sources and analytics service."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from exam_analytics.adapters import FileExamRecordSource, StaticExamRecordSource
from exam_analytics.bootstrap import (
    bootstrap_create_analytics_service,
    bootstrap_create_application,
    bootstrap_create_record_sources,
)
from exam_analytics.config import AppSettings
from exam_analytics.db import SQLAlchemyExamRecordSource


def _build_settings(tmp_path: Path, **overrides: object) -> AppSettings:
    settings_values: dict[str, object] = {"database_url": f"sqlite:///{tmp_path / 'absent.db'}"}
    settings_values.update(overrides)
    return AppSettings(_env_file=None, **settings_values)


def test_record_sources_follow_configured_order(tmp_path: Path) -> None:
    """Build one source per configured kind in fallback order."""

    settings = _build_settings(
        tmp_path,
        exam_source_order="mock,file,database",
        exam_source_file_path=str(tmp_path / "exames.json"),
    )

    sources = bootstrap_create_record_sources(settings=settings)

    assert [type(source) for source in sources] == [
        StaticExamRecordSource,
        FileExamRecordSource,
        SQLAlchemyExamRecordSource,
    ]


def test_record_sources_skip_file_kind_without_path(tmp_path: Path) -> None:
    sources = bootstrap_create_record_sources(settings=_build_settings(tmp_path))

    assert [source.source_name() for source in sources] == ["database:sqlite", "mock"]


def test_analytics_service_falls_back_from_missing_database_to_file(tmp_path: Path) -> None:
    """Serve file records when the configured database file does not exist."""

    export_path = tmp_path / "exames.json"
    export_path.write_text(
        json.dumps([{"empresa": "Acme", "medico_responsavel": "Dr. X", "data_exame": "2026-02-02", "afastamento": "Sim"}]),
        encoding="utf-8",
    )
    settings = _build_settings(tmp_path, exam_source_file_path=str(export_path), month_label_language="en")

    result = bootstrap_create_analytics_service(settings=settings).analytics_snapshot_build(reference_date=date(2026, 1, 1))

    assert result.loaded_from == "file:exames.json"
    assert result.snapshot.summary.total_absences == 1
    assert result.snapshot.monthly_series[1].month_label == "Feb"
    assert result.snapshot.monthly_series[1].employer_counts == {"Acme": 1}


def test_bootstrap_application_serves_dashboard_from_environment(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Build the full application from environment settings and serve the mock fallback."""

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'absent.db'}")
    monkeypatch.setenv("EXAM_SOURCE_ORDER", "database,mock")
    client = TestClient(bootstrap_create_application())

    response = client.get("/api/dashboard")
    health_response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["meta"]["loadedFrom"] == "mock"
    assert response.json()["summary"]["totalExams"] == 0
    assert health_response.status_code == 503
