"""initial_schema

Revision ID: 4f1c2a7b9d3e
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "4f1c2a7b9d3e"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
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
    ]


def _wedding_fk() -> sa.Column:
    return sa.Column(
        "wedding_id",
        sa.UUID(),
        sa.ForeignKey("weddings.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


def upgrade() -> None:
    op.create_table(
        "tenants",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        sa.Column("subdomain", sa.String(length=63), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_tenants_subdomain", "tenants", ["subdomain"], unique=True)

    op.create_table(
        "weddings",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        sa.Column(
            "tenant_id",
            sa.UUID(),
            sa.ForeignKey("tenants.uuid", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("partner1_name", sa.String(length=255), nullable=False),
        sa.Column("partner2_name", sa.String(length=255), nullable=False),
        sa.Column("wedding_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rsvp_code", sa.String(length=20), nullable=True, unique=True),
        sa.Column("photo_sharing_enabled", sa.Boolean(), nullable=False),
        sa.Column("photo_moderation_required", sa.Boolean(), nullable=False),
        sa.Column("payment_settings", sa.JSON(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_weddings_tenant_id", "weddings", ["tenant_id"], unique=True)

    op.create_table(
        "users",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=True),
        sa.Column("role", sa.Enum("admin", "couple", name="user_role_enum"), nullable=False),
        sa.Column(
            "tenant_id",
            sa.UUID(),
            sa.ForeignKey("tenants.uuid", ondelete="CASCADE"),
            nullable=True,
            index=True,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "seating_tables",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        _wedding_fk(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "guests",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        _wedding_fk(),
        sa.Column("name", sa.String(length=255), nullable=False, index=True),
        sa.Column("party_name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True, index=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("party_size", sa.Integer(), nullable=False),
        sa.Column("allow_plus_one", sa.Boolean(), nullable=False),
        sa.Column(
            "table_id",
            sa.UUID(),
            sa.ForeignKey("seating_tables.uuid", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        *_timestamps(),
    )

    op.create_table(
        "events",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        _wedding_fk(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("location", sa.String(length=500), nullable=True),
        sa.Column("address", sa.String(length=500), nullable=True),
        sa.Column("dress_code", sa.String(length=255), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False),
        sa.Column("meal_options", sa.JSON(), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "event_guests",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        sa.Column(
            "event_id",
            sa.UUID(),
            sa.ForeignKey("events.uuid", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "guest_id",
            sa.UUID(),
            sa.ForeignKey("guests.uuid", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "rsvp_status",
            sa.Enum("ATTENDING", "DECLINED", "MAYBE", name="rsvp_status_enum"),
            nullable=True,
        ),
        sa.Column("rsvp_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("plus_one_count", sa.Integer(), nullable=True),
        sa.Column("plus_one_name", sa.String(length=255), nullable=True),
        sa.Column("meal_choice", sa.String(length=100), nullable=True),
        sa.Column("dietary_notes", sa.String(length=500), nullable=True),
        sa.Column("invitation_sent_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("event_id", "guest_id", name="uq_event_guest"),
    )

    op.create_table(
        "gift_items",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        _wedding_fk(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("target_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("image_url", sa.String(length=500), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("is_claimed", sa.Boolean(), nullable=False),
        sa.Column("claimed_by", sa.String(length=255), nullable=True),
        sa.Column("claimed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "broadcast_messages",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        _wedding_fk(),
        sa.Column("subject", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("cta_text", sa.String(length=100), nullable=True),
        sa.Column("cta_url", sa.String(length=500), nullable=True),
        sa.Column(
            "status",
            sa.Enum("PENDING", "SENT", "CANCELLED", "FAILED", name="message_status_enum"),
            nullable=False,
            index=True,
        ),
        sa.Column("scheduled_for", sa.DateTime(timezone=True), nullable=True, index=True),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("recipient_count", sa.Integer(), nullable=False),
        sa.Column("error_message", sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "guest_photos",
        sa.Column("uuid", sa.UUID(), primary_key=True),
        _wedding_fk(),
        sa.Column("url", sa.String(length=1000), nullable=False),
        sa.Column("uploader_name", sa.String(length=255), nullable=True),
        sa.Column("caption", sa.String(length=500), nullable=True),
        sa.Column(
            "status",
            sa.Enum("PENDING", "APPROVED", "REJECTED", name="photo_status_enum"),
            nullable=False,
            index=True,
        ),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("guest_photos")
    op.drop_table("broadcast_messages")
    op.drop_table("gift_items")
    op.drop_table("event_guests")
    op.drop_table("events")
    op.drop_table("guests")
    op.drop_table("seating_tables")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_weddings_tenant_id", table_name="weddings")
    op.drop_table("weddings")
    op.drop_index("ix_tenants_subdomain", table_name="tenants")
    op.drop_table("tenants")

    for enum_name in (
        "photo_status_enum",
        "message_status_enum",
        "rsvp_status_enum",
        "user_role_enum",
    ):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
