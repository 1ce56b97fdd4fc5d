"""Typed interfaces for exam record source responsibilities."""

from dataclasses import dataclass
from typing import Protocol

from exam_analytics.domain import ExamRecord


@dataclass(frozen=True)
class ExamRecordLoadResult:
    """Result contract for one record collection load.

    Attributes:
        records: Loaded exam records in source order.
        loaded_from: Name of the source that supplied the records.
    """

    records: tuple[ExamRecord, ...]
    loaded_from: str


class ExamRecordSourcePort(Protocol):
    """Port definition for one exam record source."""

    def source_name(self) -> str:
        """Return source identifier for diagnostics and provenance.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def source_fetch_all(self) -> list[ExamRecord]:
        """Fetch every exam record held by the source.

        Returns:
            list[ExamRecord]: Exam records in source order.

        Raises:
            ExamRecordSourceError: Raised when the source cannot supply records.
        """


class ExamRecordLoaderPort(Protocol):
    """Port definition for loading records without propagating source failures."""

    def source_load(self) -> ExamRecordLoadResult:
        """Load one record collection.

        Returns:
            ExamRecordLoadResult: Records and provenance, empty when no source is available.

        Raises:
            TypeError: Raised when a source violates its record contract.
        """
