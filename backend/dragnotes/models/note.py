"""
DragNotes Backend — Note SQLAlchemy Model
===========================================

What:  ORM model representing the `notes` table.
How:   Blocks are embedded as an ordered JSON list on the note row; a note
       exclusively owns its blocks, so they are always read and replaced as
       a whole together with the note.
Who:   Read and written by NoteStore only.

Block shape (one element of `blocks`):
    {"id": "<str>", "type": "text|heading|checkbox|code|image",
     "content": {...opaque...}, "order": <int>}

Indexes:
    (user_id, is_archived, updated_at): serves the note list query
    (owner's active notes, most recently updated first)
    (user_id, created_at): owner-scoped chronological scans
"""

import enum
import uuid
from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from dragnotes.database import Base, utcnow


class BlockType(str, enum.Enum):
    """The fixed set of content block types."""

    TEXT = "text"
    HEADING = "heading"
    CHECKBOX = "checkbox"
    CODE = "code"
    IMAGE = "image"


class Note(Base):
    """
    A note owned by exactly one user.

    Lifecycle:
        1. Created via NoteService.create (not favorite, not archived)
        2. Mutated via update / toggle / reorder; each refreshes updated_at
        3. Hard-deleted via NoteService.delete (is_archived is a separate
           "hide from list" flag, not a tombstone)
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # Immutable after creation; every query filters on it
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="Owner of the note",
    )

    title: Mapped[str] = mapped_column(String(500), nullable=False)

    blocks: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Ordered content blocks; content is not validated against type",
    )

    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    __table_args__ = (
        Index("idx_notes_user_archived_updated", "user_id", "is_archived", "updated_at"),
        Index("idx_notes_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, user_id={self.user_id}, "
            f"favorite={self.is_favorite}, archived={self.is_archived})>"
        )
