"""
DragNotes Backend — Notes Route Handlers
==========================================

What:  CRUD, favorite/archive toggles and reorder under /api/notes.
How:   Every route depends on require_auth; the resulting AuthContext is
       passed explicitly into the NoteService. Note ids in the path are
       taken as plain strings so that a malformed id is a 404 like any other
       unknown note.
"""

import logging

from fastapi import APIRouter, Depends

from dragnotes.dependencies import get_note_service, require_auth
from dragnotes.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteCreateRequest,
    NoteEnvelope,
    NoteListResponse,
    NoteResponse,
    NoteUpdateRequest,
    ReorderRequest,
)
from dragnotes.services.access_guard import AuthContext
from dragnotes.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/notes",
    tags=["Notes"],
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
)

_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}


@router.get("", response_model=NoteListResponse, summary="List the caller's active notes")
async def list_notes(
    ctx: AuthContext = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
) -> NoteListResponse:
    notes = await service.list(ctx)
    return NoteListResponse(notes=[NoteResponse.model_validate(n) for n in notes])


@router.post(
    "/reorder",
    response_model=MessageResponse,
    responses=_NOT_FOUND,
    summary="Move one note directly above another",
)
async def reorder_notes(
    body: ReorderRequest,
    ctx: AuthContext = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
) -> MessageResponse:
    await service.reorder(ctx, body.source_id, body.target_id)
    return MessageResponse(message="Notes reordered successfully")


@router.get("/{note_id}", response_model=NoteEnvelope, responses=_NOT_FOUND, summary="Fetch one note")
async def get_note(
    note_id: str,
    ctx: AuthContext = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    note = await service.get(ctx, note_id)
    return NoteEnvelope(message="Note fetched successfully", note=NoteResponse.model_validate(note))


@router.post("", status_code=201, response_model=NoteEnvelope, summary="Create a note")
async def create_note(
    body: NoteCreateRequest,
    ctx: AuthContext = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    blocks = [b.model_dump(mode="json") for b in body.blocks] if body.blocks is not None else None
    note = await service.create(ctx, title=body.title, blocks=blocks)
    return NoteEnvelope(message="Note created successfully", note=NoteResponse.model_validate(note))


@router.put("/{note_id}", response_model=NoteEnvelope, responses=_NOT_FOUND, summary="Replace a note")
async def update_note(
    note_id: str,
    body: NoteUpdateRequest,
    ctx: AuthContext = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    note = await service.update(
        ctx,
        note_id,
        title=body.title,
        blocks=[b.model_dump(mode="json") for b in body.blocks],
    )
    return NoteEnvelope(message="Note updated successfully", note=NoteResponse.model_validate(note))


@router.delete("/{note_id}", response_model=MessageResponse, responses=_NOT_FOUND, summary="Delete a note")
async def delete_note(
    note_id: str,
    ctx: AuthContext = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
) -> MessageResponse:
    await service.delete(ctx, note_id)
    return MessageResponse(message="Note deleted successfully")


@router.patch(
    "/{note_id}/favorite",
    response_model=NoteEnvelope,
    responses=_NOT_FOUND,
    summary="Toggle the favorite flag",
)
async def toggle_favorite(
    note_id: str,
    ctx: AuthContext = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    note = await service.toggle_favorite(ctx, note_id)
    message = "Note added to favorites" if note.is_favorite else "Note removed from favorites"
    return NoteEnvelope(message=message, note=NoteResponse.model_validate(note))


@router.patch(
    "/{note_id}/archive",
    response_model=NoteEnvelope,
    responses=_NOT_FOUND,
    summary="Toggle the archived flag",
)
async def toggle_archive(
    note_id: str,
    ctx: AuthContext = Depends(require_auth),
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    note = await service.toggle_archive(ctx, note_id)
    message = "Note archived" if note.is_archived else "Note unarchived"
    return NoteEnvelope(message=message, note=NoteResponse.model_validate(note))
