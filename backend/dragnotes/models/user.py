"""
DragNotes Backend — User SQLAlchemy Model
===========================================

What:  ORM model representing the `users` table.
Who:   Read and written by CredentialStore only.

Table Design:
    - email: stored lower-cased and trimmed; the unique index is the last line
      of defence against duplicate signups racing each other
    - username: optional display name, not unique
    - password_hash: bcrypt output (salt embedded); plaintext is never stored
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from dragnotes.database import Base, utcnow


class User(Base):
    """
    A registered account.

    Lifecycle:
        Created on signup. No exposed operation updates or deletes it; the
        access guard still checks that the row exists on every request.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Opaque, stable user identifier",
    )

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
        comment="Normalized (lower-cased, trimmed) email address",
    )

    username: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="Optional display name",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Salted bcrypt hash of the password",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
