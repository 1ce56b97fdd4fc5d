"""Tests for the analytics service and snapshot serialization contracts."""

from __future__ import annotations

import json
import logging
from datetime import date, datetime, timezone

import pytest

from exam_analytics.adapters import ChainedExamRecordSource, ExamRecordLoadResult, StaticExamRecordSource
from exam_analytics.analytics import (
    ANALYTICS_MONTH_LABELS_EN,
    ExamAnalyticsService,
    analytics_serialize_snapshot,
    analytics_serialize_snapshot_legacy,
    analytics_serialize_snapshot_result,
)
from exam_analytics.domain import ExamRecord


class _LoaderStub:
    """Record loader stub returning a fixed load result."""

    def __init__(self, records: list[ExamRecord], loaded_from: str = "stub") -> None:
        self._result = ExamRecordLoadResult(records=tuple(records), loaded_from=loaded_from)
        self.load_calls = 0

    def source_load(self) -> ExamRecordLoadResult:
        self.load_calls += 1
        return self._result


def _fixed_clock() -> datetime:
    return datetime(2027, 1, 1, 2, 0, tzinfo=timezone.utc)


def _records() -> list[ExamRecord]:
    return [
        ExamRecord(exam_id="1", employer="Acme", physician="Dr. X", exam_date="2026-12-31", absence_flag="Sim"),
        ExamRecord(exam_id="2", employer="Acme", physician="Dr. X", exam_date="2027-01-01", absence_flag="Sim"),
        ExamRecord(exam_id="3", employer="Beta", physician="Dr. Y", exam_date="2026-05-05", absence_flag="Não"),
    ]


def test_service_resolves_current_year_in_report_timezone() -> None:
    """Use the local date of the clock, which is still 2026 in Sao Paulo."""

    loader = _LoaderStub(_records())
    service = ExamAnalyticsService(record_loader=loader, report_timezone="America/Sao_Paulo", clock=_fixed_clock)

    result = service.analytics_snapshot_build()

    assert service.analytics_current_date() == date(2026, 12, 31)
    assert result.snapshot.reference_year == 2026
    assert result.snapshot.monthly_series[11].employer_counts == {"Acme": 1}
    assert result.loaded_from == "stub"
    assert result.generated_at_utc == "2027-01-01T02:00:00+00:00"
    assert loader.load_calls == 1


def test_service_honors_explicit_reference_date_and_labels() -> None:
    service = ExamAnalyticsService(
        record_loader=_LoaderStub(_records()),
        month_labels=ANALYTICS_MONTH_LABELS_EN,
        clock=_fixed_clock,
    )

    result = service.analytics_snapshot_build(reference_date=date(2027, 3, 1))

    assert result.snapshot.reference_year == 2027
    assert result.snapshot.monthly_series[0].month_label == "Jan"
    assert result.snapshot.monthly_series[0].employer_counts == {"Acme": 1}


def test_service_applies_ranking_and_timeline_limits() -> None:
    records = [
        ExamRecord(exam_id=str(index), employer=f"E{index}", physician="Dr. X", exam_date="2026-02-02", absence_flag="sim")
        for index in range(4)
    ]
    service = ExamAnalyticsService(
        record_loader=_LoaderStub(records),
        ranking_limit=2,
        timeline_employer_limit=1,
        clock=_fixed_clock,
    )

    snapshot = service.analytics_snapshot_build(reference_date=date(2026, 1, 1)).snapshot

    assert [entry.employer for entry in snapshot.employer_ranking] == ["E0", "E1"]
    assert snapshot.monthly_series[1].employer_counts == {"E0": 1}


def test_service_degrades_to_zeroed_snapshot_when_sources_are_empty() -> None:
    """Serve a valid zeroed snapshot from an empty record chain."""

    service = ExamAnalyticsService(record_loader=ChainedExamRecordSource([]), clock=_fixed_clock)

    result = service.analytics_snapshot_build()

    assert result.loaded_from == "none"
    assert result.snapshot.summary.total_exams == 0
    assert len(result.snapshot.monthly_series) == 12


@pytest.mark.parametrize(
    "overrides",
    [
        {"record_loader": None},
        {"ranking_limit": 0},
        {"timeline_employer_limit": 6},
        {"month_labels": ("Jan",)},
    ],
)
def test_service_rejects_invalid_configuration(overrides: dict[str, object]) -> None:
    arguments: dict[str, object] = {"record_loader": ChainedExamRecordSource([StaticExamRecordSource()])}
    arguments.update(overrides)

    with pytest.raises(ValueError):
        ExamAnalyticsService(**arguments)


def test_serialized_snapshot_uses_contract_field_names() -> None:
    """Emit camelCase field names and flatten month counters next to the label."""

    service = ExamAnalyticsService(record_loader=_LoaderStub(_records()), clock=_fixed_clock)
    result = service.analytics_snapshot_build(reference_date=date(2026, 1, 1))

    payload = analytics_serialize_snapshot_result(result)

    assert json.loads(json.dumps(payload)) == payload
    assert payload["summary"] == {"totalExams": 3, "totalAbsences": 2, "overallAbsenceRatePercent": pytest.approx(200 / 3)}
    assert payload["employerRanking"] == [{"employer": "Acme", "absenceCount": 2, "absenceRatePercent": 100.0}]
    assert payload["physicianProfiles"][0] == {
        "physician": "Dr. X",
        "examCount": 2,
        "absenceCount": 2,
        "absenceRatePercent": 100.0,
    }
    assert payload["monthlySeries"][11] == {"monthLabel": "Dez", "Acme": 1}
    assert list(payload["monthlySeries"][0]) == ["monthLabel", "Acme"]
    assert payload["meta"] == {
        "referenceYear": 2026,
        "loadedFrom": "stub",
        "generatedAtUtc": "2027-01-01T02:00:00+00:00",
    }


def test_serialized_month_label_wins_over_colliding_employer_name(caplog: pytest.LogCaptureFixture) -> None:
    records = [ExamRecord(exam_id="1", employer="monthLabel", physician="Dr. X", exam_date="2026-01-02", absence_flag="Sim")]
    service = ExamAnalyticsService(record_loader=_LoaderStub(records), clock=_fixed_clock)

    with caplog.at_level(logging.WARNING):
        payload = analytics_serialize_snapshot(service.analytics_snapshot_build(reference_date=date(2026, 1, 1)).snapshot)

    assert payload["monthlySeries"][0] == {"monthLabel": "Jan"}
    collision_warnings = [record for record in caplog.records if "collides with the month label key" in record.getMessage()]
    assert len(collision_warnings) == 1


def test_legacy_serialization_keeps_chart_front_end_keys() -> None:
    """Emit the Portuguese-keyed payload consumed by existing chart pages."""

    service = ExamAnalyticsService(record_loader=_LoaderStub(_records()), clock=_fixed_clock)
    snapshot = service.analytics_snapshot_build(reference_date=date(2026, 1, 1)).snapshot

    payload = analytics_serialize_snapshot_legacy(snapshot)

    assert payload["resumo"]["totalExames"] == 3
    assert payload["resumo"]["totalAfastamentos"] == 2
    assert payload["topEmpresas"] == [{"empresa": "Acme", "total": 2, "percentual": 100.0}]
    assert payload["medicos"][1] == {"medico": "Dr. Y", "exames": 1, "afastamentos": 0, "percentual": 0.0}
    assert payload["evolucao"][11] == {"nome": "Dez", "Acme": 1}
