"""Regression tests for the exam schema Alembic migration baseline."""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect, text
from alembic import command
from alembic.config import Config

_ALEMBIC_SCRIPT_LOCATION = Path(__file__).resolve().parents[1] / "alembic"


def _migration_build_config() -> Config:
    """Build an Alembic config pointing at the repository migration scripts.

    Returns:
        Config: Alembic configuration without an ini file.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    alembic_config = Config()
    alembic_config.set_main_option("script_location", str(_ALEMBIC_SCRIPT_LOCATION))
    return alembic_config


def test_migration_upgrade_creates_exam_table_and_downgrade_drops_it(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Create the exam table on upgrade, accept a row, and drop it on downgrade."""

    database_url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setenv("DATABASE_URL", database_url)
    alembic_config = _migration_build_config()

    command.upgrade(alembic_config, "head")

    engine = create_engine(database_url)
    try:
        inspector = inspect(engine)
        assert "exame_medico" in inspector.get_table_names()
        column_names = {column["name"] for column in inspector.get_columns("exame_medico")}
        assert column_names == {
            "id_exame",
            "empresa",
            "medico_responsavel",
            "data_exame",
            "tipo_exame",
            "resultado",
            "afastamento",
        }
        index_names = {index["name"] for index in inspector.get_indexes("exame_medico")}
        assert "ix_exame_medico_empresa" in index_names

        with engine.begin() as connection:
            connection.execute(text("INSERT INTO exame_medico (empresa, afastamento) VALUES ('Acme', 'Sim')"))
            assert connection.execute(text("SELECT count(*) FROM exame_medico")).scalar_one() == 1

        command.downgrade(alembic_config, "base")

        assert "exame_medico" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()
