"""File-backed exam record source for JSON and CSV exports."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

from exam_analytics.domain import ExamRecord, domain_exam_record_from_mapping

from .source_errors import ExamRecordSourceFormatError, ExamRecordSourceUnavailableError

_FILE_SOURCE_SUPPORTED_SUFFIXES = (".json", ".csv")


class FileExamRecordSource:
    """Record source reading one exported exam file.

    JSON files hold either an array of row objects or an object with a
    `records` array. CSV files hold one header row followed by data rows.
    Column names follow the storage schema (`empresa`, `data_exame`, ...) or
    the English field names (`employer`, `examDate`, ...).
    """

    def __init__(self, file_path: str | Path):
        """Initialize file source.

        Args:
            file_path: Path of the JSON or CSV export.

        Raises:
            ValueError: Raised when the path is blank or has an unsupported suffix.
        """

        if not str(file_path).strip():
            raise ValueError("file_path must not be blank")
        self._file_path = Path(file_path)
        if self._file_path.suffix.lower() not in _FILE_SOURCE_SUPPORTED_SUFFIXES:
            raise ValueError(f"unsupported exam file suffix: {self._file_path.suffix or '<none>'}")

    def source_name(self) -> str:
        """Return source identifier including the file name.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return f"file:{self._file_path.name}"

    def source_fetch_all(self) -> list[ExamRecord]:
        """Read and decode every row of the export file.

        Returns:
            list[ExamRecord]: Exam records in file order.

        Raises:
            ExamRecordSourceUnavailableError: Raised when the file cannot be read.
            ExamRecordSourceFormatError: Raised when the file content cannot be decoded.
        """

        try:
            file_text = self._file_path.read_text(encoding="utf-8-sig")
        except OSError as error:
            raise ExamRecordSourceUnavailableError(
                f"exam file could not be read: {self._file_path}",
                source_name=self.source_name(),
            ) from error
        except UnicodeDecodeError as error:
            raise ExamRecordSourceFormatError(
                f"exam file is not valid UTF-8: {self._file_path}",
                source_name=self.source_name(),
            ) from error

        if self._file_path.suffix.lower() == ".json":
            rows = self._decode_json_rows(file_text)
        else:
            rows = self._decode_csv_rows(file_text)

        try:
            return [domain_exam_record_from_mapping(row) for row in rows]
        except TypeError as error:
            raise ExamRecordSourceFormatError(
                f"exam file holds a non-object row: {self._file_path}",
                source_name=self.source_name(),
            ) from error

    def _decode_json_rows(self, file_text: str) -> list[Any]:
        try:
            payload = json.loads(file_text)
        except json.JSONDecodeError as error:
            raise ExamRecordSourceFormatError(
                f"exam file is not valid JSON: {self._file_path}",
                source_name=self.source_name(),
            ) from error

        if isinstance(payload, dict):
            payload = payload.get("records")
        if not isinstance(payload, list):
            raise ExamRecordSourceFormatError(
                f"exam JSON file must hold an array of records: {self._file_path}",
                source_name=self.source_name(),
            )
        return payload

    def _decode_csv_rows(self, file_text: str) -> list[dict[str, Any]]:
        try:
            reader = csv.DictReader(file_text.splitlines())
            return [{key: (value if value != "" else None) for key, value in row.items()} for row in reader]
        except csv.Error as error:
            raise ExamRecordSourceFormatError(
                f"exam file is not valid CSV: {self._file_path}",
                source_name=self.source_name(),
            ) from error


__all__ = ["FileExamRecordSource"]
