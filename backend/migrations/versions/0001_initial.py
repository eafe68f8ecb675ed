"""Initial schema – users, password entries, tags, activity logs

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19

Creates every table the service needs, with the foreign keys and indexes
used by the entry search and the activity pagination queries.
"""

from alembic import op
import sqlalchemy as sa

# Alembic revision identifiers
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # -- users ----------------------------------------------------------
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "role",
            sa.Enum("admin", name="user_role"),
            nullable=False,
            server_default="admin",
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("1")),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"])

    # -- password_entries -----------------------------------------------
    op.create_table(
        "password_entries",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("website_name", sa.String(255), nullable=False),
        sa.Column("client_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        # Plaintext – see DESIGN.md open questions
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_password_entries_website_name", "password_entries", ["website_name"])
    op.create_index("ix_password_entries_client_name", "password_entries", ["client_name"])
    op.create_index("ix_password_entries_created_at", "password_entries", ["created_at"])

    # -- password_entry_tags --------------------------------------------
    op.create_table(
        "password_entry_tags",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "entry_id",
            sa.Integer(),
            sa.ForeignKey("password_entries.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("tag", sa.String(64), nullable=False),
    )
    op.create_index("ix_password_entry_tags_entry_id", "password_entry_tags", ["entry_id"])
    op.create_index("ix_password_entry_tags_tag", "password_entry_tags", ["tag"])

    # -- activity_logs --------------------------------------------------
    # No foreign keys: rows must outlive the entries and admins they name.
    op.create_table(
        "activity_logs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("admin_name", sa.String(255), nullable=False),
        sa.Column(
            "action",
            sa.Enum("add", "edit", "delete", "view", name="activity_action"),
            nullable=False,
        ),
        sa.Column("entry_name", sa.String(255), nullable=False),
        sa.Column("details", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_activity_logs_admin_name", "activity_logs", ["admin_name"])
    op.create_index("ix_activity_logs_action", "activity_logs", ["action"])
    op.create_index("ix_activity_logs_created_at", "activity_logs", ["created_at"])


def downgrade() -> None:
    op.drop_table("activity_logs")
    op.drop_table("password_entry_tags")
    op.drop_table("password_entries")
    op.drop_table("users")
