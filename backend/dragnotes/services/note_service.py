"""
DragNotes Backend — Note Service (Business Logic)
===================================================

What:  CRUD, favorite/archive toggles and reordering of a user's notes.
How:   Every operation takes the caller's AuthContext explicitly and goes
       through the owner-scoped NoteStore. Client-supplied owner fields are
       never consulted.
Who:   Called by the /api/notes route handlers.

Not-found semantics:
    A note that does not exist, belongs to someone else, or whose id is not
    even well-formed all produce the same NotFoundError, so callers cannot
    probe for other users' notes.

Reordering:
    There is no stored position. reorder() stamps the target with "now" and
    the source with "now + 1s", which moves both to the top of list() with
    the source directly above the target.
"""

import logging
import uuid
from datetime import timedelta
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from dragnotes.database import utcnow
from dragnotes.exceptions import NotFoundError, ValidationError
from dragnotes.models.note import BlockType, Note
from dragnotes.services.access_guard import AuthContext
from dragnotes.services.note_store import NoteStore

logger = logging.getLogger(__name__)

NoteId = Union[str, uuid.UUID]

_BLOCK_TYPES = {t.value for t in BlockType}


def _parse_note_id(note_id: NoteId) -> uuid.UUID:
    if isinstance(note_id, uuid.UUID):
        return note_id
    try:
        return uuid.UUID(str(note_id))
    except ValueError:
        raise NotFoundError(resource="note", resource_id=str(note_id))


def _clean_title(title: Optional[str]) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValidationError(
            message="Validation failed",
            field="title",
            errors=[{"loc": ["body", "title"], "msg": "Title is required", "type": "value_error"}],
        )
    return cleaned


def _normalize_blocks(blocks: Optional[Sequence[Mapping[str, Any]]]) -> List[Dict[str, Any]]:
    """
    Validate block structure and assign ids to new blocks.

    Only the envelope is checked (type in the fixed set, content is a mapping,
    order is an integer). Content is stored as-is whatever the type.
    """
    if blocks is None:
        return []

    normalized: List[Dict[str, Any]] = []
    errors: List[Dict[str, Any]] = []
    for index, block in enumerate(blocks):
        loc = ["body", "blocks", index]
        if not isinstance(block, Mapping):
            errors.append({"loc": loc, "msg": "Block must be an object", "type": "value_error"})
            continue
        block_type = block.get("type")
        if isinstance(block_type, BlockType):
            block_type = block_type.value
        if block_type not in _BLOCK_TYPES:
            errors.append({"loc": loc + ["type"], "msg": "Invalid block type", "type": "value_error"})
        content = block.get("content")
        if not isinstance(content, Mapping):
            errors.append({"loc": loc + ["content"], "msg": "Content must be an object", "type": "value_error"})
        order = block.get("order")
        if isinstance(order, bool) or not isinstance(order, int):
            errors.append({"loc": loc + ["order"], "msg": "Order must be an integer", "type": "value_error"})
        if errors:
            continue
        normalized.append({
            "id": str(block.get("id") or uuid.uuid4().hex),
            "type": block_type,
            "content": dict(content),
            "order": order,
        })

    if errors:
        raise ValidationError(message="Validation failed", field="blocks", errors=errors)
    return normalized


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list / get: owner-scoped reads
        - create / update / delete: writes with title and block validation
        - toggle_favorite / toggle_archive: flag flips
        - reorder: timestamp-based ordering of two notes
    """

    def __init__(self, store: NoteStore):
        self.store = store

    async def _get_owned(self, ctx: AuthContext, note_id: NoteId) -> Note:
        parsed = _parse_note_id(note_id)
        note = await self.store.find_owned(parsed, ctx.user_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=str(parsed))
        return note

    async def list(self, ctx: AuthContext) -> List[Note]:
        """All non-archived notes of the caller, most recently updated first."""
        return await self.store.list_active(ctx.user_id)

    async def get(self, ctx: AuthContext, note_id: NoteId) -> Note:
        return await self._get_owned(ctx, note_id)

    async def create(
        self,
        ctx: AuthContext,
        title: str,
        blocks: Optional[Sequence[Mapping[str, Any]]] = None,
    ) -> Note:
        now = utcnow()
        note = Note(
            user_id=ctx.user_id,
            title=_clean_title(title),
            blocks=_normalize_blocks(blocks),
            is_favorite=False,
            is_archived=False,
            created_at=now,
            updated_at=now,
        )
        await self.store.add(note)
        logger.info("Note %s created by %s", note.id, ctx.user_id)
        return note

    async def update(
        self,
        ctx: AuthContext,
        note_id: NoteId,
        title: str,
        blocks: Sequence[Mapping[str, Any]],
    ) -> Note:
        """Full replace of title and blocks."""
        cleaned_title = _clean_title(title)
        cleaned_blocks = _normalize_blocks(blocks)
        note = await self._get_owned(ctx, note_id)
        note.title = cleaned_title
        note.blocks = cleaned_blocks
        note.updated_at = utcnow()
        await self.store.save()
        return note

    async def delete(self, ctx: AuthContext, note_id: NoteId) -> None:
        note = await self._get_owned(ctx, note_id)
        await self.store.delete(note)
        logger.info("Note %s deleted by %s", note.id, ctx.user_id)

    async def toggle_favorite(self, ctx: AuthContext, note_id: NoteId) -> Note:
        note = await self._get_owned(ctx, note_id)
        note.is_favorite = not note.is_favorite
        note.updated_at = utcnow()
        await self.store.save()
        return note

    async def toggle_archive(self, ctx: AuthContext, note_id: NoteId) -> Note:
        note = await self._get_owned(ctx, note_id)
        note.is_archived = not note.is_archived
        note.updated_at = utcnow()
        await self.store.save()
        return note

    async def reorder(
        self,
        ctx: AuthContext,
        source_id: NoteId,
        target_id: NoteId,
    ) -> Tuple[Note, Note]:
        """
        Place the source note directly above the target note in list().

        Raises:
            NotFoundError: either note is missing or not owned (the error
                does not say which).
        """
        try:
            source = await self._get_owned(ctx, source_id)
            target = await self._get_owned(ctx, target_id)
        except NotFoundError:
            raise NotFoundError(
                resource="note",
                context={"source_id": str(source_id), "target_id": str(target_id)},
            )

        now = utcnow()
        target.updated_at = now
        source.updated_at = now + timedelta(seconds=1)
        await self.store.save()
        return source, target
