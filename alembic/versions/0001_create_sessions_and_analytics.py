"""create test_sessions and analytics

Revision ID: 0001
Revises:
Create Date: 2026-10-19 12:00:00

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

JSONType = sa.JSON().with_variant(JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "test_sessions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("self_code", sa.String(6), nullable=False),
        sa.Column("demographics", JSONType, nullable=False),
        sa.Column("answers", JSONType, nullable=False),
        sa.Column("question_times", JSONType, nullable=False),
        sa.Column("total_time", sa.Integer(), nullable=False),
        sa.Column("analysis", JSONType, nullable=False),
        sa.Column("ip_address", sa.String(), nullable=False),
        sa.Column("user_agent", sa.Text(), nullable=False),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_test_sessions_id", "test_sessions", ["id"], unique=True)
    op.create_index("ix_test_sessions_self_code", "test_sessions", ["self_code"])

    op.create_table(
        "analytics",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("event", sa.String(), nullable=False),
        sa.Column("session_id", sa.Uuid(), nullable=True),
        sa.Column("demographics", JSONType, nullable=True),
        sa.Column("metadata", JSONType, nullable=True),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_analytics_id", "analytics", ["id"])
    op.create_index("ix_analytics_event", "analytics", ["event"])
    op.create_index("ix_analytics_session_id", "analytics", ["session_id"])
    op.create_index("ix_analytics_timestamp", "analytics", ["timestamp"])


def downgrade() -> None:
    op.drop_table("analytics")
    op.drop_table("test_sessions")
