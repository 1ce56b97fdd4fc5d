"""Analytics layer package for exam absence aggregation boundaries."""

from .aggregator import (
    ANALYTICS_DEFAULT_RANKING_LIMIT,
    ANALYTICS_DEFAULT_TIMELINE_EMPLOYER_LIMIT,
    ANALYTICS_MONTH_LABELS,
    ANALYTICS_MONTH_LABELS_EN,
    ANALYTICS_MONTH_LABELS_PT,
    analytics_build_monthly_series,
    analytics_build_snapshot,
    analytics_profile_physicians,
    analytics_rank_employers,
    analytics_summarize_kpis,
    analytics_validate_records,
)
from .interfaces import (
    AnalyticsPort,
    AnalyticsSnapshot,
    AnalyticsSnapshotResult,
    AnalyticsSummary,
    EmployerRankingEntry,
    MonthlySeriesEntry,
    PhysicianProfile,
)
from .serialization import (
    analytics_serialize_snapshot,
    analytics_serialize_snapshot_legacy,
    analytics_serialize_snapshot_result,
)
from .service import ExamAnalyticsService

__all__ = [
    "ANALYTICS_DEFAULT_RANKING_LIMIT",
    "ANALYTICS_DEFAULT_TIMELINE_EMPLOYER_LIMIT",
    "ANALYTICS_MONTH_LABELS",
    "ANALYTICS_MONTH_LABELS_EN",
    "ANALYTICS_MONTH_LABELS_PT",
    "AnalyticsPort",
    "AnalyticsSnapshot",
    "AnalyticsSnapshotResult",
    "AnalyticsSummary",
    "EmployerRankingEntry",
    "ExamAnalyticsService",
    "MonthlySeriesEntry",
    "PhysicianProfile",
    "analytics_build_monthly_series",
    "analytics_build_snapshot",
    "analytics_profile_physicians",
    "analytics_rank_employers",
    "analytics_serialize_snapshot",
    "analytics_serialize_snapshot_legacy",
    "analytics_serialize_snapshot_result",
    "analytics_summarize_kpis",
    "analytics_validate_records",
]
