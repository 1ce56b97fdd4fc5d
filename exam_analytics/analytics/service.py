"""Analytics service computing dashboard snapshots from a record loader."""
# pylint: disable=too-few-public-methods

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from exam_analytics.adapters import ExamRecordLoaderPort
from exam_analytics.domain import DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER

from .aggregator import (
    ANALYTICS_DEFAULT_RANKING_LIMIT,
    ANALYTICS_DEFAULT_TIMELINE_EMPLOYER_LIMIT,
    ANALYTICS_MONTH_LABELS_PT,
    analytics_build_snapshot,
)
from .interfaces import AnalyticsSnapshotResult

logger = logging.getLogger(__name__)


class ExamAnalyticsService:
    """Fetch exam records and compute one fresh analytics snapshot per call."""

    def __init__(
        self,
        record_loader: ExamRecordLoaderPort,
        report_timezone: str = "UTC",
        ranking_limit: int = ANALYTICS_DEFAULT_RANKING_LIMIT,
        timeline_employer_limit: int = ANALYTICS_DEFAULT_TIMELINE_EMPLOYER_LIMIT,
        month_labels: Sequence[str] = ANALYTICS_MONTH_LABELS_PT,
        absence_marker: str = DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize analytics service dependencies.

        Args:
            record_loader: Record loader that never propagates source failures.
            report_timezone: IANA timezone resolving "today" and offset-aware exam dates.
            ranking_limit: Maximum number of ranked employers.
            timeline_employer_limit: Number of top-ranked employers charted monthly.
            month_labels: Twelve month display labels.
            absence_marker: Canonical absence flag value.
            clock: Optional UTC clock provider used for the current date.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when dependencies or limits are invalid.
        """

        if record_loader is None:
            raise ValueError("record_loader must not be None")
        if ranking_limit < 1:
            raise ValueError("ranking_limit must be >= 1")
        if timeline_employer_limit < 1 or timeline_employer_limit > ranking_limit:
            raise ValueError("timeline_employer_limit must be between 1 and ranking_limit")
        if len(month_labels) != 12:
            raise ValueError("month_labels must contain exactly 12 labels")

        self._record_loader = record_loader
        self._report_timezone = ZoneInfo(report_timezone)
        self._ranking_limit = ranking_limit
        self._timeline_employer_limit = timeline_employer_limit
        self._month_labels = tuple(month_labels)
        self._absence_marker = absence_marker
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def analytics_current_date(self) -> date:
        """Return today's date in the report timezone.

        Returns:
            date: Current local date.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return self._clock().astimezone(self._report_timezone).date()

    def analytics_snapshot_build(self, reference_date: date | None = None) -> AnalyticsSnapshotResult:
        """Load records and compute one analytics snapshot.

        Args:
            reference_date: Optional date whose year is charted, today when omitted.

        Returns:
            AnalyticsSnapshotResult: Snapshot and input provenance.

        Raises:
            TypeError: Raised when a record source violates its record contract.
        """

        load_result = self._record_loader.source_load()
        resolved_reference_date = reference_date or self.analytics_current_date()
        snapshot = analytics_build_snapshot(
            load_result.records,
            resolved_reference_date,
            ranking_limit=self._ranking_limit,
            timeline_employer_limit=self._timeline_employer_limit,
            report_timezone=self._report_timezone,
            month_labels=self._month_labels,
            absence_marker=self._absence_marker,
        )
        logger.debug(
            "analytics snapshot computed: exams=%d absences=%d year=%d source=%s",
            snapshot.summary.total_exams,
            snapshot.summary.total_absences,
            snapshot.reference_year,
            load_result.loaded_from,
            extra={"loaded_from": load_result.loaded_from, "reference_year": snapshot.reference_year},
        )
        return AnalyticsSnapshotResult(
            snapshot=snapshot,
            loaded_from=load_result.loaded_from,
            generated_at_utc=self._clock().astimezone(timezone.utc).isoformat(),
        )


__all__ = ["ExamAnalyticsService"]
