"""Tests for shared exam record normalization and parsing helpers."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from exam_analytics.domain import (
    ExamRecord,
    domain_exam_group_key,
    domain_exam_is_absence,
    domain_exam_record_from_mapping,
    domain_exam_resolve_date,
)


def _record_with_flag(absence_flag) -> ExamRecord:
    return ExamRecord(exam_id="1", employer="Acme", physician="Dr. X", exam_date=None, absence_flag=absence_flag)


@pytest.mark.parametrize("absence_flag", ["Sim", "sim", " SIM ", "\tsim\n"])
def test_absence_predicate_accepts_marker_variants(absence_flag: str) -> None:
    """Accept the marker regardless of surrounding whitespace and case."""

    assert domain_exam_is_absence(_record_with_flag(absence_flag)) is True


@pytest.mark.parametrize("absence_flag", [None, "", "Não", "nao", "si m", "yes"])
def test_absence_predicate_rejects_other_values(absence_flag) -> None:
    """Treat missing and any non-marker value as no absence."""

    assert domain_exam_is_absence(_record_with_flag(absence_flag)) is False


def test_group_key_routes_missing_values_to_unknown() -> None:
    assert domain_exam_group_key(None) == "unknown"
    assert domain_exam_group_key("   ") == "unknown"
    assert domain_exam_group_key(" Acme ") == " Acme "


def test_resolve_date_supports_source_value_shapes() -> None:
    """Parse ISO text, timestamps, day-first text, epoch milliseconds and typed values."""

    assert domain_exam_resolve_date("2026-02-03") == date(2026, 2, 3)
    assert domain_exam_resolve_date("2026-02-03 08:15:00.000000") == date(2026, 2, 3)
    assert domain_exam_resolve_date("2026-02-03T08:15:00.000Z") == date(2026, 2, 3)
    assert domain_exam_resolve_date("03/02/2026") == date(2026, 2, 3)
    assert domain_exam_resolve_date(date(2026, 2, 3)) == date(2026, 2, 3)
    assert domain_exam_resolve_date(datetime(2026, 2, 3, 23, 0)) == date(2026, 2, 3)

    epoch_millis = int(datetime(2026, 2, 3, 12, 0, tzinfo=timezone.utc).timestamp() * 1000)
    assert domain_exam_resolve_date(epoch_millis) == date(2026, 2, 3)
    assert domain_exam_resolve_date(str(epoch_millis)) == date(2026, 2, 3)


def test_resolve_date_converts_aware_values_to_report_timezone() -> None:
    aware_value = datetime(2026, 2, 3, 1, 0, tzinfo=timezone(timedelta(hours=0)))

    assert domain_exam_resolve_date(aware_value, ZoneInfo("America/Sao_Paulo")) == date(2026, 2, 2)


@pytest.mark.parametrize("value", [None, "", "   ", "not-a-date", "2026-13-45", True, object()])
def test_resolve_date_returns_none_for_malformed_values(value) -> None:
    """Return None instead of raising for values that are not dates."""

    assert domain_exam_resolve_date(value) is None


def test_record_from_mapping_accepts_storage_column_names() -> None:
    """Map storage column names to the record fields."""

    record = domain_exam_record_from_mapping(
        {
            "id_exame": 7,
            "empresa": "Acme",
            "medico_responsavel": "Dr. X",
            "data_exame": "2026-01-02",
            "tipo_exame": "admissional",
            "resultado": "inapto",
            "afastamento": "Sim",
        }
    )

    assert record == ExamRecord(
        exam_id="7",
        employer="Acme",
        physician="Dr. X",
        exam_date="2026-01-02",
        exam_type="admissional",
        result="inapto",
        absence_flag="Sim",
    )


def test_record_from_mapping_accepts_english_names_and_missing_fields() -> None:
    record = domain_exam_record_from_mapping({"id": "a1", "employer": "Acme", "examDate": "2026-01-02"})

    assert record.exam_id == "a1"
    assert record.employer == "Acme"
    assert record.exam_date == "2026-01-02"
    assert record.physician is None
    assert record.absence_flag is None


def test_record_from_mapping_rejects_non_mapping_rows() -> None:
    with pytest.raises(TypeError):
        domain_exam_record_from_mapping(["Acme", "Dr. X"])


@pytest.mark.parametrize(
    "value",
    [
        "0001-01-01T00:00:00+05:00",
        "9999-12-31T23:00:00-05:00",
        datetime(1, 1, 1, 0, 0, tzinfo=timezone(timedelta(hours=5))),
    ],
)
def test_resolve_date_returns_none_when_timezone_shift_leaves_date_range(value) -> None:
    assert domain_exam_resolve_date(value) is None


def test_resolve_date_returns_none_for_year_one_sentinel_in_report_timezone() -> None:
    """Drop a UTC midnight sentinel that would shift into year zero locally."""

    assert domain_exam_resolve_date("0001-01-01T00:00:00Z", ZoneInfo("America/Sao_Paulo")) is None


def test_resolve_date_ignores_non_ascii_digit_text_as_epoch() -> None:
    assert domain_exam_resolve_date("²" * 9) is None


def test_resolve_date_returns_none_for_epoch_before_date_range() -> None:
    epoch_millis = int(datetime(1, 1, 1, 1, 0, tzinfo=timezone.utc).timestamp() * 1000)

    assert domain_exam_resolve_date(epoch_millis, ZoneInfo("America/Sao_Paulo")) is None
