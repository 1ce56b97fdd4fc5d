"""Database record source for the `exame_medico` exam table."""

from __future__ import annotations

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from exam_analytics.adapters import ExamRecordSourceUnavailableError
from exam_analytics.domain import ExamRecord, domain_exam_record_from_mapping

from .sqlite_paths import db_sqlite_missing_database_path


class SQLAlchemyExamRecordSource:
    """SQLAlchemy implementation of the exam record source port.

    Rows are read in `id_exame` order rather than storage order, so ranking
    tie-breaks follow exam identifiers. For the SQLite schema `id_exame` is the
    rowid, so both orders coincide; other backends guarantee no storage order.
    """

    _EXAM_SELECT_QUERY = (
        "SELECT "
        "id_exame, empresa, medico_responsavel, data_exame, tipo_exame, resultado, afastamento "
        "FROM exame_medico "
        "ORDER BY id_exame asc"
    )

    def __init__(self, engine: Engine):
        """Initialize exam record source.

        Args:
            engine: SQLAlchemy engine used for reads.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when engine is invalid.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def source_name(self) -> str:
        """Return source identifier including the database backend.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return f"database:{self._engine.url.get_backend_name()}"

    def source_fetch_all(self) -> list[ExamRecord]:
        """Read every exam row in identifier order.

        Returns:
            list[ExamRecord]: Exam records.

        Raises:
            ExamRecordSourceUnavailableError: Raised when the database or table cannot be read.
        """

        missing_path = db_sqlite_missing_database_path(self._engine)
        if missing_path is not None:
            raise ExamRecordSourceUnavailableError(
                f"sqlite database file not found: {missing_path}",
                source_name=self.source_name(),
            )

        try:
            with self._engine.connect() as connection:
                rows = connection.execute(text(self._EXAM_SELECT_QUERY)).mappings().all()
        except SQLAlchemyError as error:
            raise ExamRecordSourceUnavailableError(
                "exam record read failed",
                source_name=self.source_name(),
            ) from error

        return [domain_exam_record_from_mapping(row) for row in rows]


__all__ = ["SQLAlchemyExamRecordSource"]
