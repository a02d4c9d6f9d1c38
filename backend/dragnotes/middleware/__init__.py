# Middleware package init
"""
DragNotes Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    The request ID is generated first so the access log line and every
    application log line of the request share it. Authentication is not a
    middleware: protected routes declare the require_auth dependency.
"""
