"""Shared exam record normalization and parsing helpers.

This module centralizes the absence predicate, grouping-key fallback and exam
date parsing so every analytics pass and every record source applies the same
rules.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo

from .models import ExamDateValue, ExamRecord

DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER = "sim"
DOMAIN_EXAM_UNKNOWN_GROUP_LABEL = "unknown"

_DOMAIN_EXAM_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "exam_id": ("id_exame", "id", "exam_id", "examId"),
    "employer": ("empresa", "employer"),
    "physician": ("medico_responsavel", "physician"),
    "exam_date": ("data_exame", "exam_date", "examDate"),
    "exam_type": ("tipo_exame", "exam_type", "examType"),
    "result": ("resultado", "result"),
    "absence_flag": ("afastamento", "absence_flag", "absenceFlag"),
}

_DOMAIN_EXAM_DATE_TEXT_FORMATS = ("%d/%m/%Y", "%Y/%m/%d", "%d-%m-%Y", "%Y%m%d")


def domain_exam_is_absence(record: ExamRecord, marker: str = DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER) -> bool:
    """Return whether one exam record carries a work-absence determination.

    Args:
        record: Exam record to classify.
        marker: Canonical absence marker, compared case-insensitively.

    Returns:
        bool: True when the trimmed, case-folded flag equals the marker.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    absence_flag = record.absence_flag
    if not isinstance(absence_flag, str):
        return False
    return absence_flag.strip().casefold() == marker.strip().casefold()


def domain_exam_group_key(value: str | None) -> str:
    """Resolve one grouping key, routing missing values to the unknown bucket.

    Args:
        value: Employer or physician value from a record.

    Returns:
        str: Value unchanged, or the unknown bucket label when missing or blank.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not isinstance(value, str) or not value.strip():
        return DOMAIN_EXAM_UNKNOWN_GROUP_LABEL
    return value


def domain_exam_resolve_date(value: ExamDateValue, report_timezone: ZoneInfo | None = None) -> date | None:
    """Resolve one raw exam date value into a calendar date.

    Offset-aware timestamps and epoch milliseconds are converted to the report
    timezone before the calendar date is taken. Naive values are used as-is.

    Args:
        value: Raw exam date value from a record source.
        report_timezone: Timezone used for offset-aware values, UTC when omitted.

    Returns:
        date | None: Parsed calendar date, or None when missing or malformed.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    target_timezone = report_timezone or timezone.utc
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _domain_exam_datetime_to_date(value, target_timezone)
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        try:
            parsed_timestamp = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
        return _domain_exam_datetime_to_date(parsed_timestamp, target_timezone)
    if isinstance(value, str):
        return _domain_exam_parse_date_text(value, target_timezone)
    return None


def domain_exam_record_from_mapping(row: Mapping[str, Any]) -> ExamRecord:
    """Build one exam record from a source row using known field aliases.

    Both storage column names (`empresa`, `data_exame`, ...) and English field
    names (`employer`, `examDate`, ...) are accepted.

    Args:
        row: Source row mapping.

    Returns:
        ExamRecord: Immutable exam record.

    Raises:
        TypeError: Raised when row is not a mapping.
    """

    if not isinstance(row, Mapping):
        raise TypeError(f"exam row must be a mapping, got {type(row).__name__}")

    exam_id = _domain_exam_lookup(row, "exam_id")
    exam_date = _domain_exam_lookup(row, "exam_date")
    return ExamRecord(
        exam_id=None if exam_id is None else str(exam_id),
        employer=_domain_exam_optional_text(_domain_exam_lookup(row, "employer")),
        physician=_domain_exam_optional_text(_domain_exam_lookup(row, "physician")),
        exam_date=exam_date,
        exam_type=_domain_exam_optional_text(_domain_exam_lookup(row, "exam_type")),
        result=_domain_exam_optional_text(_domain_exam_lookup(row, "result")),
        absence_flag=_domain_exam_optional_text(_domain_exam_lookup(row, "absence_flag")),
    )


def _domain_exam_lookup(row: Mapping[str, Any], field_name: str) -> Any:
    for alias in _DOMAIN_EXAM_FIELD_ALIASES[field_name]:
        if alias in row:
            return row[alias]
    return None


def _domain_exam_optional_text(value: Any) -> str | None:
    """Keep text values verbatim and stringify other scalars; None stays None."""

    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def _domain_exam_datetime_to_date(value: datetime, target_timezone) -> date | None:
    if value.tzinfo is None or value.utcoffset() is None:
        return value.date()
    # Shifting a timestamp near year 1 or 9999 can leave the datetime range.
    try:
        return value.astimezone(target_timezone).date()
    except (OverflowError, ValueError):
        return None


def _domain_exam_parse_date_text(value: str, target_timezone) -> date | None:
    """Parse ISO dates, ISO timestamps, numeric epoch text and common day-first formats.

    Args:
        value: Date text from a record source.
        target_timezone: Timezone used for offset-aware timestamps.

    Returns:
        date | None: Parsed date when supported, else None.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    normalized_value = value.strip()
    if not normalized_value:
        return None

    if normalized_value.isascii() and normalized_value.isdigit() and len(normalized_value) > 8:
        return domain_exam_resolve_date(int(normalized_value), target_timezone)

    iso_candidate = normalized_value
    if iso_candidate.endswith("Z"):
        iso_candidate = f"{iso_candidate[:-1]}+00:00"
    try:
        return date.fromisoformat(iso_candidate)
    except ValueError:
        pass
    try:
        return _domain_exam_datetime_to_date(datetime.fromisoformat(iso_candidate), target_timezone)
    except ValueError:
        pass

    date_part = normalized_value.split(" ", maxsplit=1)[0]
    for supported_format in _DOMAIN_EXAM_DATE_TEXT_FORMATS:
        try:
            return datetime.strptime(date_part, supported_format).date()
        except ValueError:
            continue
    return None


__all__ = [
    "DOMAIN_EXAM_DEFAULT_ABSENCE_MARKER",
    "DOMAIN_EXAM_UNKNOWN_GROUP_LABEL",
    "domain_exam_group_key",
    "domain_exam_is_absence",
    "domain_exam_record_from_mapping",
    "domain_exam_resolve_date",
]
