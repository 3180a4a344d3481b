"""add_external_registries

Revision ID: 8b2d4e6f1a3c
Revises: 4f1c2a7b9d3e
Create Date: 2026-10-18 12:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "8b2d4e6f1a3c"
down_revision = "4f1c2a7b9d3e"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "external_registries",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        sa.Column(
            "wedding_id",
            sa.UUID(),
            sa.ForeignKey("weddings.uuid", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("url", sa.String(length=500), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("external_registries")
