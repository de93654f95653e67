"""Create settings, locations, roster, punch log and unauthorized-attempt tables

Revision ID: 001_attendance_tables
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001_attendance_tables"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    is_sqlite = bind.dialect.name == "sqlite"
    ts_default = sa.text("CURRENT_TIMESTAMP") if is_sqlite else sa.text("now()")

    op.create_table(
        "app_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("key", sa.String(), nullable=False),
        sa.Column("value", sa.String(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=ts_default, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_app_settings_id"), "app_settings", ["id"], unique=False)
    op.create_index(op.f("ix_app_settings_key"), "app_settings", ["key"], unique=True)

    op.create_table(
        "locations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("radius_meters", sa.Float(), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index(op.f("ix_locations_id"), "locations", ["id"], unique=False)

    op.create_table(
        "roster_members",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("subject_id", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=False),
        sa.Column("kind", sa.String(), nullable=False, server_default="WORKER"),
        sa.Column("credential", sa.String(), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=ts_default, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_roster_members_id"), "roster_members", ["id"], unique=False)
    op.create_index(op.f("ix_roster_members_subject_id"), "roster_members", ["subject_id"], unique=True)
    op.create_index(op.f("ix_roster_members_kind"), "roster_members", ["kind"], unique=False)

    op.create_table(
        "punch_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("timestamp", sa.String(), nullable=False),
        sa.Column("subject_id", sa.String(), nullable=False),
        sa.Column("subject_name", sa.String(), nullable=False),
        sa.Column("subject_kind", sa.String(), nullable=False, server_default="WORKER"),
        sa.Column("action", sa.String(), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("accuracy_meters", sa.Float(), nullable=True),
        sa.Column("within_geofence", sa.Boolean(), nullable=False),
        sa.Column("client_agent", sa.String(), nullable=False, server_default=""),
        sa.Column("matched_location_name", sa.String(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=ts_default, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_punch_logs_id"), "punch_logs", ["id"], unique=False)
    op.create_index(op.f("ix_punch_logs_subject_id"), "punch_logs", ["subject_id"], unique=False)

    op.create_table(
        "unauthorized_attempts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("timestamp", sa.String(), nullable=False),
        sa.Column("subject_id", sa.String(), nullable=False),
        sa.Column("subject_name", sa.String(), nullable=False),
        sa.Column("subject_kind", sa.String(), nullable=False, server_default="WORKER"),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("accuracy_meters", sa.Float(), nullable=True),
        sa.Column("distance_meters", sa.Float(), nullable=True),
        sa.Column("reason", sa.String(), nullable=False),
        sa.Column("client_agent", sa.String(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=ts_default, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_unauthorized_attempts_id"), "unauthorized_attempts", ["id"], unique=False)
    op.create_index(op.f("ix_unauthorized_attempts_subject_id"), "unauthorized_attempts", ["subject_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_unauthorized_attempts_subject_id"), table_name="unauthorized_attempts")
    op.drop_index(op.f("ix_unauthorized_attempts_id"), table_name="unauthorized_attempts")
    op.drop_table("unauthorized_attempts")
    op.drop_index(op.f("ix_punch_logs_subject_id"), table_name="punch_logs")
    op.drop_index(op.f("ix_punch_logs_id"), table_name="punch_logs")
    op.drop_table("punch_logs")
    op.drop_index(op.f("ix_roster_members_kind"), table_name="roster_members")
    op.drop_index(op.f("ix_roster_members_subject_id"), table_name="roster_members")
    op.drop_index(op.f("ix_roster_members_id"), table_name="roster_members")
    op.drop_table("roster_members")
    op.drop_index(op.f("ix_locations_id"), table_name="locations")
    op.drop_table("locations")
    op.drop_index(op.f("ix_app_settings_key"), table_name="app_settings")
    op.drop_index(op.f("ix_app_settings_id"), table_name="app_settings")
    op.drop_table("app_settings")
