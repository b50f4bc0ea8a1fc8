"""Initial schema - permission records.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "permission",
        sa.Column("id", sa.BigInteger(), sa.Identity(), primary_key=True),
        sa.Column("scope", sa.String(64), nullable=True),
        sa.Column("subject_type", sa.String(16), nullable=False),
        sa.Column("subject_id", sa.String(64), nullable=False),
        sa.Column("node", sa.String(512), nullable=False),
        sa.Column("allowed", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.CheckConstraint(
            "subject_type IN ('role', 'user')", name="ck_permission_subject_type"
        ),
    )
    op.create_index("ix_permission_scope", "permission", ["scope"])
    op.create_index("ix_permission_node", "permission", ["node"])
    op.create_index(
        "ix_permission_subject", "permission", ["subject_type", "subject_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_permission_subject", table_name="permission")
    op.drop_index("ix_permission_node", table_name="permission")
    op.drop_index("ix_permission_scope", table_name="permission")
    op.drop_table("permission")
