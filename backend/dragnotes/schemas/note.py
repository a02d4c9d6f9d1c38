"""
DragNotes Backend — Note Request/Response Schemas
===================================================

What:  Pydantic models defining the notes API contract.
How:   FastAPI validates request bodies against these models and serializes
       responses through them. Field names are snake_case in Python and
       camelCase on the wire (isFavorite, updatedAt, sourceId, ...); request
       bodies accept either spelling.

None of the request models has an owner field: the owner always comes from
the authenticated context.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from dragnotes.models.note import BlockType


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _strip_title(v: str) -> str:
    stripped = v.strip()
    if not stripped:
        raise ValueError("Title is required")
    return stripped


# ══════════════════════════════════════════════════════════════════════════
# Shared
# ══════════════════════════════════════════════════════════════════════════


class Block(CamelModel):
    """
    One content unit of a note.

    `content` is an opaque key/value bag: it is stored and returned as-is
    and is not checked against `type`.
    """
    id: Optional[str] = Field(default=None, description="Server-assigned when omitted")
    type: BlockType = Field(description="text, heading, checkbox, code or image")
    content: Dict[str, Any] = Field(description="Free-form block payload")
    order: int = Field(description="Caller-assigned position hint")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreateRequest(CamelModel):
    title: str = Field(max_length=500)
    blocks: Optional[List[Block]] = Field(default=None)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class NoteUpdateRequest(CamelModel):
    """Full replacement: both fields are required."""
    title: str = Field(max_length=500)
    blocks: List[Block]

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class ReorderRequest(CamelModel):
    source_id: uuid.UUID = Field(description="Note to move")
    target_id: uuid.UUID = Field(description="Note to place it above")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID = Field(description="Owner of the note")
    title: str
    blocks: List[Block]
    is_favorite: bool
    is_archived: bool
    created_at: datetime
    updated_at: datetime


class NoteEnvelope(CamelModel):
    message: str
    note: NoteResponse


class NoteListResponse(CamelModel):
    """Active (non-archived) notes, most recently updated first. Unpaginated."""
    message: str = "Notes fetched successfully"
    notes: List[NoteResponse]


class MessageResponse(CamelModel):
    message: str


# ══════════════════════════════════════════════════════════════════════════
# Error / Health
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error body.

    Example:
        {
            "error": "validation_error",
            "message": "Validation failed",
            "errors": [{"loc": ["body", "title"], "msg": "Title is required", "type": "value_error"}],
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    errors: Optional[List[Dict[str, Any]]] = Field(default=None, description="Field-level problems")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="healthy or unhealthy")
    version: str
    database: str = Field(description="connected or disconnected")
    uptime_seconds: float
