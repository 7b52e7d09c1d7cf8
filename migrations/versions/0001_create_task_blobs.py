"""create task_blobs table"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_task_blobs"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "task_blobs",
        sa.Column("key", sa.String(length=100), primary_key=True),
        sa.Column("value", sa.LargeBinary(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("task_blobs")
