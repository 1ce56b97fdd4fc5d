"""SQLite file-path helpers for read-only database access."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import Engine

_DB_SQLITE_IN_MEMORY_NAMES = frozenset({"", ":memory:"})


def db_sqlite_missing_database_path(engine: Engine) -> Path | None:
    """Return the SQLite database path when the engine points at a missing file.

    SQLite silently creates absent database files on connect, so read paths
    check for the file first.

    Args:
        engine: SQLAlchemy engine.

    Returns:
        Path | None: Missing file path, or None for existing files, in-memory and non-SQLite engines.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if engine.url.get_backend_name() != "sqlite":
        return None
    database_name = engine.url.database or ""
    if database_name in _DB_SQLITE_IN_MEMORY_NAMES or database_name.startswith("file:"):
        return None
    database_path = Path(database_name)
    if database_path.exists():
        return None
    return database_path


__all__ = ["db_sqlite_missing_database_path"]
