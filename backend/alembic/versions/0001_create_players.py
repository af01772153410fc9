"""create players table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    json_document = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")
    op.create_table(
        "players",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("nickname", sa.String(length=100), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("rating", sa.Integer(), nullable=False, server_default="1000"),
        sa.Column("elo", sa.Integer(), nullable=False, server_default="1000"),
        sa.Column("role", sa.String(length=50), nullable=False),
        sa.Column("region", sa.String(length=50), nullable=False),
        sa.Column("language", sa.String(length=10), nullable=False, server_default="en"),
        sa.Column("wins", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("losses", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("rank", sa.String(length=50), nullable=False),
        sa.Column("cosmetics", json_document, nullable=True),
        sa.Column("settings", json_document, nullable=True),
        sa.Column("preferred_mode", sa.String(length=50), nullable=False),
        sa.Column("preferred_role", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(op.f("ix_players_nickname"), "players", ["nickname"], unique=True)
    op.create_index(op.f("ix_players_deleted_at"), "players", ["deleted_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_players_deleted_at"), table_name="players")
    op.drop_index(op.f("ix_players_nickname"), table_name="players")
    op.drop_table("players")
