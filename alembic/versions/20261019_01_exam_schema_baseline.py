"""Exam records schema baseline

Revision ID: 20261019_01
Revises: None
Create Date: 2026-10-19
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "exame_medico",
        sa.Column("id_exame", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("empresa", sa.Text(), nullable=True),
        sa.Column("medico_responsavel", sa.Text(), nullable=True),
        sa.Column("data_exame", sa.DateTime(), nullable=True),
        sa.Column("tipo_exame", sa.Text(), nullable=True),
        sa.Column("resultado", sa.Text(), nullable=True),
        sa.Column("afastamento", sa.Text(), nullable=True),
    )
    op.create_index("ix_exame_medico_empresa", "exame_medico", ["empresa"])
    op.create_index("ix_exame_medico_medico_responsavel", "exame_medico", ["medico_responsavel"])
    op.create_index("ix_exame_medico_data_exame", "exame_medico", ["data_exame"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_exame_medico_data_exame", table_name="exame_medico")
    op.drop_index("ix_exame_medico_medico_responsavel", table_name="exame_medico")
    op.drop_index("ix_exame_medico_empresa", table_name="exame_medico")
    op.drop_table("exame_medico")
