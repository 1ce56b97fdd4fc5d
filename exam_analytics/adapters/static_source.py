"""In-memory exam record source used for demos, tests and offline fallback."""

from __future__ import annotations

from collections.abc import Iterable

from exam_analytics.domain import ExamRecord


class StaticExamRecordSource:
    """Record source serving a fixed in-memory record list."""

    def __init__(self, records: Iterable[ExamRecord] = (), name: str = "mock"):
        """Initialize static source.

        Args:
            records: Records served on every fetch.
            name: Source identifier reported as provenance.

        Raises:
            ValueError: Raised when name is blank.
        """

        if not name.strip():
            raise ValueError("name must not be blank")
        self._records = tuple(records)
        self._name = name.strip()

    def source_name(self) -> str:
        return self._name

    def source_fetch_all(self) -> list[ExamRecord]:
        return list(self._records)


__all__ = ["StaticExamRecordSource"]
