"""JSON payload builders for analytics snapshots."""

from __future__ import annotations

import logging

from .interfaces import (
    AnalyticsSnapshot,
    AnalyticsSnapshotResult,
    EmployerRankingEntry,
    MonthlySeriesEntry,
    PhysicianProfile,
)

logger = logging.getLogger(__name__)


def analytics_serialize_snapshot(snapshot: AnalyticsSnapshot) -> dict[str, object]:
    """Serialize one snapshot to the dashboard JSON contract.

    Args:
        snapshot: Computed analytics snapshot.

    Returns:
        dict[str, object]: Plain JSON-serializable payload.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "summary": {
            "totalExams": snapshot.summary.total_exams,
            "totalAbsences": snapshot.summary.total_absences,
            "overallAbsenceRatePercent": snapshot.summary.overall_absence_rate_percent,
        },
        "employerRanking": [_analytics_serialize_employer(entry) for entry in snapshot.employer_ranking],
        "physicianProfiles": [_analytics_serialize_physician(profile) for profile in snapshot.physician_profiles],
        "monthlySeries": _analytics_label_series(snapshot.monthly_series, "monthLabel"),
    }


def analytics_serialize_snapshot_result(result: AnalyticsSnapshotResult) -> dict[str, object]:
    """Serialize one snapshot result including provenance metadata.

    Args:
        result: Snapshot result.

    Returns:
        dict[str, object]: Snapshot payload with a `meta` object.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    payload = analytics_serialize_snapshot(result.snapshot)
    payload["meta"] = {
        "referenceYear": result.snapshot.reference_year,
        "loadedFrom": result.loaded_from,
        "generatedAtUtc": result.generated_at_utc,
    }
    return payload


def analytics_serialize_snapshot_legacy(snapshot: AnalyticsSnapshot) -> dict[str, object]:
    """Serialize one snapshot to the Portuguese-keyed payload of the chart front-end.

    Args:
        snapshot: Computed analytics snapshot.

    Returns:
        dict[str, object]: Payload keyed `resumo`, `topEmpresas`, `medicos`, `evolucao`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "resumo": {
            "totalExames": snapshot.summary.total_exams,
            "totalAfastamentos": snapshot.summary.total_absences,
            "percentualGeral": snapshot.summary.overall_absence_rate_percent,
        },
        "topEmpresas": [
            {"empresa": entry.employer, "total": entry.absence_count, "percentual": entry.absence_rate_percent}
            for entry in snapshot.employer_ranking
        ],
        "medicos": [
            {
                "medico": profile.physician,
                "exames": profile.exam_count,
                "afastamentos": profile.absence_count,
                "percentual": profile.absence_rate_percent,
            }
            for profile in snapshot.physician_profiles
        ],
        "evolucao": _analytics_label_series(snapshot.monthly_series, "nome"),
    }


def _analytics_serialize_employer(entry: EmployerRankingEntry) -> dict[str, object]:
    return {
        "employer": entry.employer,
        "absenceCount": entry.absence_count,
        "absenceRatePercent": entry.absence_rate_percent,
    }


def _analytics_serialize_physician(profile: PhysicianProfile) -> dict[str, object]:
    return {
        "physician": profile.physician,
        "examCount": profile.exam_count,
        "absenceCount": profile.absence_count,
        "absenceRatePercent": profile.absence_rate_percent,
    }


def _analytics_label_series(series: tuple[MonthlySeriesEntry, ...], label_key: str) -> list[dict[str, object]]:
    if any(label_key in entry.employer_counts for entry in series):
        logger.warning("employer named %r collides with the month label key; its counts are omitted", label_key)
    return [_analytics_label_month(entry, label_key) for entry in series]


def _analytics_label_month(entry: MonthlySeriesEntry, label_key: str) -> dict[str, object]:
    # Label key stays first and wins over an employer literally named like it.
    month_payload: dict[str, object] = {label_key: entry.month_label, **entry.employer_counts}
    month_payload[label_key] = entry.month_label
    return month_payload


__all__ = [
    "analytics_serialize_snapshot",
    "analytics_serialize_snapshot_legacy",
    "analytics_serialize_snapshot_result",
]
