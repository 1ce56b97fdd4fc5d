"""Database layer package for all SQL and persistence boundaries."""

from .exam_record import SQLAlchemyExamRecordSource
from .health import SQLAlchemyDatabaseHealthService
from .interfaces import DatabaseHealthPort
from .session import db_create_engine
from .sqlite_paths import db_sqlite_missing_database_path

__all__ = [
    "DatabaseHealthPort",
    "SQLAlchemyDatabaseHealthService",
    "SQLAlchemyExamRecordSource",
    "db_create_engine",
    "db_sqlite_missing_database_path",
]
