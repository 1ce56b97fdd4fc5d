"""Project-native typed exceptions for exam record source failures."""

from __future__ import annotations


class ExamRecordSourceError(RuntimeError):
    """Base exception for a record source that cannot supply records.

    Attributes:
        source_name: Name of the failing source.
    """

    def __init__(self, message: str, source_name: str | None = None):
        super().__init__(message)
        self.source_name = source_name


class ExamRecordSourceUnavailableError(ExamRecordSourceError):
    """Source backend is missing or unreachable."""


class ExamRecordSourceFormatError(ExamRecordSourceError):
    """Source payload could not be decoded into exam rows."""
