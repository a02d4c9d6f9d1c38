"""
DragNotes Backend — Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by stores, services and the access guard; caught by global handlers.
When:  During request processing when recoverable errors occur.

Exception Hierarchy:
    DragNotesError (base)
    ├── ValidationError      → 422 Unprocessable Entity (client can fix)
    ├── ConflictError        → 422 Unprocessable Entity (uniqueness violation)
    ├── AuthenticationError  → 401 Unauthorized
    ├── NotFoundError        → 404 Not Found (absent OR not owned)
    └── InternalError        → 500 Internal Server Error
"""

from typing import Any, Dict, List, Optional


class DragNotesError(Exception):
    """
    Base exception for all DragNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(DragNotesError):
    """
    Raised when client input fails validation.

    When:    Malformed email, short password, empty title.
    HTTP:    422 Unprocessable Entity

    `errors` mirrors the shape of FastAPI's request validation errors so
    clients can handle service-level and schema-level failures the same way:
        [{"loc": ["body", "email"], "msg": "...", "type": "value_error"}]
    """

    status_code = 422
    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field
        self.errors = errors or []


class ConflictError(DragNotesError):
    """
    Raised when a write would violate a uniqueness constraint.

    When:    Signup with an email that is already registered.
    HTTP:    422 Unprocessable Entity
    """

    status_code = 422
    error_code = "conflict"

    def __init__(
        self,
        message: str = "Email already exists.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthenticationError(DragNotesError):
    """
    Raised for missing, malformed, forged or expired credentials.

    When:    Bad login, missing/invalid bearer token, token for a deleted user.
    HTTP:    401 Unauthorized

    The message is always generic. The concrete reason ("user not found",
    "invalid password", "token expired") goes into `context` for the server
    log only.
    """

    status_code = 401
    error_code = "authentication_failed"

    def __init__(
        self,
        message: str = "Authentication failed.",
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(message=message, context=ctx)
        self.reason = reason


class NotFoundError(DragNotesError):
    """
    Raised when a requested resource does not exist for the caller.

    When:    GET /api/notes/{id} for an unknown id or for another user's note.
    HTTP:    404 Not Found

    The message never reveals whether the resource exists for someone else;
    the id is kept in `context` for logging.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found."
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class InternalError(DragNotesError):
    """
    Raised when a store or runtime operation fails unexpectedly.

    When:    Connection lost mid-query, unexpected constraint violation, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Detailed error
    info is logged server-side only.
    """

    def __init__(
        self,
        message: str = "An internal error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
