"""Exam absence aggregation passes and snapshot assembly.

Every function in this module is a pure transformation of an in-memory record
collection. Grouping uses insertion-ordered dicts and sorting uses Python's
stable sort, so ties always keep first-encounter order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from zoneinfo import ZoneInfo

from exam_analytics.domain import (
    DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER,
    ExamRecord,
    domain_exam_group_key,
    domain_exam_is_absence,
    domain_exam_resolve_date,
)

from .interfaces import (
    AnalyticsSnapshot,
    AnalyticsSummary,
    EmployerRankingEntry,
    MonthlySeriesEntry,
    PhysicianProfile,
)

ANALYTICS_MONTH_LABELS_PT = ("Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez")
ANALYTICS_MONTH_LABELS_EN = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
ANALYTICS_MONTH_LABELS = {"pt": ANALYTICS_MONTH_LABELS_PT, "en": ANALYTICS_MONTH_LABELS_EN}

ANALYTICS_DEFAULT_RANKING_LIMIT = 5
ANALYTICS_DEFAULT_TIMELINE_EMPLOYER_LIMIT = 3


def analytics_summarize_kpis(
    records: Iterable[ExamRecord],
    absence_marker: str = DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER,
) -> AnalyticsSummary:
    """Count exams and absences across the whole collection.

    Args:
        records: Exam records.
        absence_marker: Canonical absence flag value.

    Returns:
        AnalyticsSummary: Totals and overall absence rate.

    Raises:
        TypeError: Raised when records is not a collection of exam records.
    """

    validated_records = analytics_validate_records(records)
    total_exams = len(validated_records)
    total_absences = sum(1 for record in validated_records if domain_exam_is_absence(record, absence_marker))
    return AnalyticsSummary(
        total_exams=total_exams,
        total_absences=total_absences,
        overall_absence_rate_percent=_analytics_rate_percent(total_absences, total_exams),
    )


def analytics_rank_employers(
    records: Iterable[ExamRecord],
    limit: int = ANALYTICS_DEFAULT_RANKING_LIMIT,
    absence_marker: str = DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER,
) -> tuple[EmployerRankingEntry, ...]:
    """Rank employers by absence volume and keep the top entries.

    Only absence-flagged records contribute to the ranking. The per-employer
    rate uses every exam of that employer as denominator.

    Args:
        records: Exam records, absence-flagged or not.
        limit: Maximum number of ranked employers.
        absence_marker: Canonical absence flag value.

    Returns:
        tuple[EmployerRankingEntry, ...]: Employers sorted by descending absence count.

    Raises:
        TypeError: Raised when records is not a collection of exam records.
        ValueError: Raised when limit is negative.
    """

    if limit < 0:
        raise ValueError("limit must not be negative")

    validated_records = analytics_validate_records(records)
    absence_counts: dict[str, int] = {}
    exam_counts: dict[str, int] = {}
    for record in validated_records:
        employer = domain_exam_group_key(record.employer)
        exam_counts[employer] = exam_counts.get(employer, 0) + 1
        if domain_exam_is_absence(record, absence_marker):
            absence_counts[employer] = absence_counts.get(employer, 0) + 1

    ranked_employers = sorted(absence_counts.items(), key=lambda item: item[1], reverse=True)
    return tuple(
        EmployerRankingEntry(
            employer=employer,
            absence_count=absence_count,
            absence_rate_percent=_analytics_rate_percent(absence_count, exam_counts[employer]),
        )
        for employer, absence_count in ranked_employers[:limit]
    )


def analytics_profile_physicians(
    records: Iterable[ExamRecord],
    absence_marker: str = DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER,
) -> tuple[PhysicianProfile, ...]:
    """Compute exam count, absence count and absence rate for every physician.

    Args:
        records: Exam records.
        absence_marker: Canonical absence flag value.

    Returns:
        tuple[PhysicianProfile, ...]: One profile per distinct physician, sorted by descending rate.

    Raises:
        TypeError: Raised when records is not a collection of exam records.
    """

    validated_records = analytics_validate_records(records)
    counters: dict[str, list[int]] = {}
    for record in validated_records:
        physician_counter = counters.setdefault(domain_exam_group_key(record.physician), [0, 0])
        physician_counter[0] += 1
        if domain_exam_is_absence(record, absence_marker):
            physician_counter[1] += 1

    profiles = [
        PhysicianProfile(
            physician=physician,
            exam_count=exam_count,
            absence_count=absence_count,
            absence_rate_percent=_analytics_rate_percent(absence_count, exam_count),
        )
        for physician, (exam_count, absence_count) in counters.items()
    ]
    return tuple(sorted(profiles, key=lambda profile: profile.absence_rate_percent, reverse=True))


def analytics_build_monthly_series(
    records: Iterable[ExamRecord],
    charted_employers: Sequence[str],
    reference_year: int,
    report_timezone: ZoneInfo | None = None,
    month_labels: Sequence[str] = ANALYTICS_MONTH_LABELS_PT,
    absence_marker: str = DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER,
) -> tuple[MonthlySeriesEntry, ...]:
    """Build the January-December absence series of the charted employers.

    Records outside the reference year, records of other employers and records
    with a missing or malformed exam date are skipped.

    Args:
        records: Exam records, absence-flagged or not.
        charted_employers: Employer names charted in the series, in ranking order.
        reference_year: Calendar year covered by the series.
        report_timezone: Timezone applied to offset-aware exam timestamps.
        month_labels: Twelve month display labels.
        absence_marker: Canonical absence flag value.

    Returns:
        tuple[MonthlySeriesEntry, ...]: Exactly twelve entries in calendar order.

    Raises:
        TypeError: Raised when records is not a collection of exam records.
        ValueError: Raised when month_labels does not hold twelve labels.
    """

    if len(month_labels) != 12:
        raise ValueError("month_labels must contain exactly 12 labels")

    validated_records = analytics_validate_records(records)
    charted_names = list(dict.fromkeys(charted_employers))
    month_counts: dict[int, dict[str, int]] = {
        month_number: {employer: 0 for employer in charted_names} for month_number in range(1, 13)
    }

    for record in validated_records:
        if not domain_exam_is_absence(record, absence_marker):
            continue
        exam_date = domain_exam_resolve_date(record.exam_date, report_timezone)
        if exam_date is None or exam_date.year != reference_year:
            continue
        employer = domain_exam_group_key(record.employer)
        employer_counts = month_counts[exam_date.month]
        if employer not in employer_counts:
            continue
        employer_counts[employer] += 1

    return tuple(
        MonthlySeriesEntry(
            month_number=month_number,
            month_label=month_labels[month_number - 1],
            employer_counts=month_counts[month_number],
        )
        for month_number in range(1, 13)
    )


def analytics_build_snapshot(
    records: Iterable[ExamRecord],
    reference_date: date,
    ranking_limit: int = ANALYTICS_DEFAULT_RANKING_LIMIT,
    timeline_employer_limit: int = ANALYTICS_DEFAULT_TIMELINE_EMPLOYER_LIMIT,
    report_timezone: ZoneInfo | None = None,
    month_labels: Sequence[str] = ANALYTICS_MONTH_LABELS_PT,
    absence_marker: str = DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER,
) -> AnalyticsSnapshot:
    """Run every aggregation pass over one record collection.

    Args:
        records: Exam records.
        reference_date: Date whose calendar year is charted in the monthly series.
        ranking_limit: Maximum number of ranked employers.
        timeline_employer_limit: Number of top-ranked employers charted monthly.
        report_timezone: Timezone applied to offset-aware exam timestamps.
        month_labels: Twelve month display labels.
        absence_marker: Canonical absence flag value.

    Returns:
        AnalyticsSnapshot: Complete analytics snapshot.

    Raises:
        TypeError: Raised when records is not a collection of exam records.
    """

    validated_records = analytics_validate_records(records)
    employer_ranking = analytics_rank_employers(validated_records, ranking_limit, absence_marker)
    charted_employers = [entry.employer for entry in employer_ranking[:timeline_employer_limit]]

    return AnalyticsSnapshot(
        summary=analytics_summarize_kpis(validated_records, absence_marker),
        employer_ranking=employer_ranking,
        physician_profiles=analytics_profile_physicians(validated_records, absence_marker),
        monthly_series=analytics_build_monthly_series(
            validated_records,
            charted_employers,
            reference_date.year,
            report_timezone=report_timezone,
            month_labels=month_labels,
            absence_marker=absence_marker,
        ),
        reference_year=reference_date.year,
    )


def analytics_validate_records(records: Iterable[ExamRecord]) -> tuple[ExamRecord, ...]:
    """Materialize and type-check one record collection.

    Args:
        records: Candidate exam record collection.

    Returns:
        tuple[ExamRecord, ...]: Records in original order.

    Raises:
        TypeError: Raised when records is not an iterable of exam records.
    """

    if isinstance(records, tuple) and all(isinstance(record, ExamRecord) for record in records):
        return records
    if records is None or isinstance(records, (str, bytes)) or not isinstance(records, Iterable):
        raise TypeError("records must be an iterable of ExamRecord")

    materialized_records = tuple(records)
    for position, record in enumerate(materialized_records):
        if not isinstance(record, ExamRecord):
            raise TypeError(f"records[{position}] must be ExamRecord, got {type(record).__name__}")
    return materialized_records


def _analytics_rate_percent(numerator: int, denominator: int) -> float:
    if denominator <= 0:
        return 0.0
    return numerator / denominator * 100


__all__ = [
    "ANALYTICS_DEFAULT_RANKING_LIMIT",
    "ANALYTICS_DEFAULT_TIMELINE_EMPLOYER_LIMIT",
    "ANALYTICS_MONTH_LABELS",
    "ANALYTICS_MONTH_LABELS_EN",
    "ANALYTICS_MONTH_LABELS_PT",
    "analytics_build_monthly_series",
    "analytics_build_snapshot",
    "analytics_profile_physicians",
    "analytics_rank_employers",
    "analytics_summarize_kpis",
    "analytics_validate_records",
]
