"""
DragNotes Backend — Application Package
=========================================

Layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Access Guard / Authenticator /    │  ← auth, ownership, validation
    │          Note Service               │
    ├─────────────────────────────────────┤
    │     Credential Store / Note Store   │  ← owner-scoped queries
    ├─────────────────────────────────────┤
    │   Models & Schemas / Database       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
