"""Adapter layer package for exam record source boundaries."""

from .chained_source import CHAINED_SOURCE_NONE_LABEL, ChainedExamRecordSource
from .file_source import FileExamRecordSource
from .interfaces import ExamRecordLoaderPort, ExamRecordLoadResult, ExamRecordSourcePort
from .source_errors import (
    ExamRecordSourceError,
    ExamRecordSourceFormatError,
    ExamRecordSourceUnavailableError,
)
from .static_source import StaticExamRecordSource

__all__ = [
    "CHAINED_SOURCE_NONE_LABEL",
    "ChainedExamRecordSource",
    "ExamRecordLoadResult",
    "ExamRecordLoaderPort",
    "ExamRecordSourceError",
    "ExamRecordSourceFormatError",
    "ExamRecordSourcePort",
    "ExamRecordSourceUnavailableError",
    "FileExamRecordSource",
    "StaticExamRecordSource",
]
