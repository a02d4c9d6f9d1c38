"""
DragNotes Backend — API Route Handlers

Routes handle HTTP concerns (status codes, envelopes) and delegate all
business logic to the services layer.

Modules:
    auth:   POST /api/auth/signup, POST /api/auth/login, GET /api/auth/profile
    notes:  /api/notes CRUD, favorite/archive toggles, reorder
    health: GET /, GET /health
"""
