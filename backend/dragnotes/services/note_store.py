"""
DragNotes Backend — Note Store
================================

What:  Owner-scoped persistence of notes.
How:   Every lookup takes both the note id AND the owner id, so a note that
       belongs to someone else is simply not found. There is deliberately
       no "get by id only" method.

Query plans:
    list_active: WHERE user_id = :owner AND is_archived = false
                 ORDER BY updated_at DESC
                 → idx_notes_user_archived_updated
    find_owned:  WHERE id = :id AND user_id = :owner → primary key
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dragnotes.exceptions import InternalError
from dragnotes.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_active(self, owner_id: uuid.UUID) -> List[Note]:
        try:
            result = await self._session.execute(
                select(Note)
                .where(Note.user_id == owner_id, Note.is_archived.is_(False))
                .order_by(desc(Note.updated_at))
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing notes for %s: %s", owner_id, e, exc_info=True)
            raise InternalError(context={"operation": "list_notes"})

    async def find_owned(self, note_id: uuid.UUID, owner_id: uuid.UUID) -> Optional[Note]:
        try:
            result = await self._session.execute(
                select(Note).where(Note.id == note_id, Note.user_id == owner_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, e, exc_info=True)
            raise InternalError(context={"operation": "find_note", "note_id": str(note_id)})

    async def add(self, note: Note) -> Note:
        self._session.add(note)
        await self.save()
        return note

    async def delete(self, note: Note) -> None:
        try:
            await self._session.delete(note)
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note.id, e, exc_info=True)
            raise InternalError(context={"operation": "delete_note", "note_id": str(note.id)})

    async def save(self) -> None:
        """Flush pending changes; the request session commits them."""
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Database error saving notes: %s", e, exc_info=True)
            raise InternalError(context={"operation": "save_notes"})
