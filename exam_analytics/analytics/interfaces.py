"""Typed interfaces for analytics-layer aggregations."""

from dataclasses import dataclass, field
from datetime import date
from typing import Protocol


@dataclass(frozen=True)
class AnalyticsSummary:
    """Global exam and absence KPIs.

    Attributes:
        total_exams: Number of exam records.
        total_absences: Number of absence-flagged exam records.
        overall_absence_rate_percent: Absences over exams as a percentage, zero without exams.
    """

    total_exams: int
    total_absences: int
    overall_absence_rate_percent: float


@dataclass(frozen=True)
class EmployerRankingEntry:
    """One employer in the absence-volume ranking.

    Attributes:
        employer: Employer grouping key.
        absence_count: Number of absence-flagged exams for the employer.
        absence_rate_percent: Employer absences over employer exams as a percentage.
    """

    employer: str
    absence_count: int
    absence_rate_percent: float


@dataclass(frozen=True)
class PhysicianProfile:
    """Exam and absence statistics for one responsible physician.

    Attributes:
        physician: Physician grouping key.
        exam_count: Number of exams performed by the physician.
        absence_count: Number of those exams flagged as absence.
        absence_rate_percent: Absences over exams as a percentage.
    """

    physician: str
    exam_count: int
    absence_count: int
    absence_rate_percent: float


@dataclass(frozen=True)
class MonthlySeriesEntry:
    """Absence counters of the charted employers for one calendar month.

    Attributes:
        month_number: Calendar month number (1-12), used only for ordering.
        month_label: Display label of the month.
        employer_counts: Absence count per charted employer, in ranking order.
    """

    month_number: int
    month_label: str
    employer_counts: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class AnalyticsSnapshot:
    """All derived analytics views computed from one record collection.

    Attributes:
        summary: Global KPIs.
        employer_ranking: Top employers by absence count.
        physician_profiles: Every physician sorted by absence rate.
        monthly_series: Twelve month slots of the reference year.
        reference_year: Calendar year the monthly series covers.
    """

    summary: AnalyticsSummary
    employer_ranking: tuple[EmployerRankingEntry, ...]
    physician_profiles: tuple[PhysicianProfile, ...]
    monthly_series: tuple[MonthlySeriesEntry, ...]
    reference_year: int


@dataclass(frozen=True)
class AnalyticsSnapshotResult:
    """Snapshot together with the provenance of its input records.

    Attributes:
        snapshot: Computed analytics snapshot.
        loaded_from: Name of the record source that supplied the records.
        generated_at_utc: UTC ISO-8601 timestamp of the computation.
    """

    snapshot: AnalyticsSnapshot
    loaded_from: str
    generated_at_utc: str


class AnalyticsPort(Protocol):
    """Port definition for services producing analytics snapshots."""

    def analytics_snapshot_build(self, reference_date: date | None = None) -> AnalyticsSnapshotResult:
        """Fetch exam records and compute one analytics snapshot.

        Args:
            reference_date: Optional date whose year is charted, today when omitted.

        Returns:
            AnalyticsSnapshotResult: Snapshot and input provenance.

        Raises:
            TypeError: Raised when a record source violates its record contract.
        """
