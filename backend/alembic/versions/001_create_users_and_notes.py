"""Create users and notes tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `users` (unique email) and `notes` (owned by a user, blocks
       embedded as JSON, favorite/archive flags).
Rollback: downgrade() drops both tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False, comment="Opaque, stable user identifier"),
        sa.Column(
            "email",
            sa.String(320),
            nullable=False,
            comment="Normalized (lower-cased, trimmed) email address",
        ),
        sa.Column("username", sa.String(255), nullable=True, comment="Optional display name"),
        sa.Column(
            "password_hash",
            sa.String(255),
            nullable=False,
            comment="Salted bcrypt hash of the password",
        ),
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
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "notes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False, comment="Owner of the note"),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column(
            "blocks",
            sa.JSON(),
            nullable=False,
            comment="Ordered content blocks; content is not validated against type",
        ),
        sa.Column("is_favorite", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_archived", sa.Boolean(), nullable=False, server_default=sa.false()),
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
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    # List query: owner's active notes, most recently updated first
    op.create_index(
        "idx_notes_user_archived_updated",
        "notes",
        ["user_id", "is_archived", "updated_at"],
    )
    op.create_index("idx_notes_user_created", "notes", ["user_id", "created_at"])


def downgrade() -> None:
    op.drop_index("idx_notes_user_created", table_name="notes")
    op.drop_index("idx_notes_user_archived_updated", table_name="notes")
    op.drop_table("notes")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
