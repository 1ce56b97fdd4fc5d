"""Typed domain models shared across runtime layers.

This module provides the exam record contract consumed by the analytics layer
and the small status payloads used by operational surfaces.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

ExamDateValue = Union[date, datetime, str, int, float, None]


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


@dataclass(frozen=True)
class ExamRecord:
    """One performed occupational-health exam as supplied by a record source.

    Attributes:
        exam_id: Source identifier of the exam.
        employer: Employer organization name, used verbatim as grouping key.
        physician: Responsible examiner name, used verbatim as grouping key.
        exam_date: Raw exam date value as stored by the source.
        exam_type: Exam category label (admission, periodic, dismissal).
        result: Free-text exam outcome.
        absence_flag: Free-text work-absence determination flag.
    """

    exam_id: str | None
    employer: str | None
    physician: str | None
    exam_date: ExamDateValue
    exam_type: str | None = None
    result: str | None = None
    absence_flag: str | None = None
