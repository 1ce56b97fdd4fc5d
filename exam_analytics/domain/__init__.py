"""Domain models used across application layer boundaries."""

from .exam_parsing import (
    DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER,
    DOMAIN_EXAM_UNKNOWN_GROUP_LABEL,
    domain_exam_group_key,
    domain_exam_is_absence,
    domain_exam_record_from_mapping,
    domain_exam_resolve_date,
)
from .models import ExamDateValue, ExamRecord, HealthStatus

__all__ = [
    "DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER",
    "DOMAIN_EXAM_UNKNOWN_GROUP_LABEL",
    "ExamDateValue",
    "ExamRecord",
    "HealthStatus",
    "domain_exam_group_key",
    "domain_exam_is_absence",
    "domain_exam_record_from_mapping",
    "domain_exam_resolve_date",
]
