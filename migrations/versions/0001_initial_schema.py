"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _base_columns():
    return [
        sa.Column("id", sa.UUID(as_uuid=True), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        *_base_columns(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False, server_default="admin"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "projects",
        *_base_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("tech_stack", sa.JSON(), nullable=False),
        sa.Column("github_url", sa.String(500)),
        sa.Column("demo_url", sa.String(500)),
        sa.Column("image_url", sa.String(500)),
        sa.Column("category", sa.String(100), nullable=False, server_default=""),
        sa.Column("status", sa.String(50), nullable=False, server_default="completed"),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "categories",
        *_base_columns(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text()),
    )

    op.create_table(
        "notes",
        *_base_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("excerpt", sa.Text()),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("category_id", sa.UUID(as_uuid=True), sa.ForeignKey("categories.id", ondelete="SET NULL")),
    )

    op.create_table(
        "videos",
        *_base_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("video_url", sa.String(500), nullable=False),
        sa.Column("thumbnail_url", sa.String(500)),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
    )

    op.create_table(
        "contact_messages",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("subject", sa.String(255)),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="unread"),
    )
    op.create_index("ix_contact_messages_status", "contact_messages", ["status"])


def downgrade() -> None:
    op.drop_index("ix_contact_messages_status", table_name="contact_messages")
    op.drop_table("contact_messages")
    op.drop_table("videos")
    op.drop_table("notes")
    op.drop_table("categories")
    op.drop_table("projects")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
