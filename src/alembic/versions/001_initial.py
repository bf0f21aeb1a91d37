"""Create projects and votes tables

Revision ID: 001
Revises:
Create Date: 2025-03-08 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "votes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("voter_id", sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column("cast_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("project_id", "voter_id", name="uq_votes_project_voter"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_votes_project_id", "votes", ["project_id"], unique=False)
    op.create_index("idx_votes_voter_project", "votes", ["voter_id", "project_id"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_votes_voter_project", table_name="votes")
    op.drop_index("ix_votes_project_id", table_name="votes")
    op.drop_table("votes")
    op.drop_table("projects")
