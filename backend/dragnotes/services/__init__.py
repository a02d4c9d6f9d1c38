# Services package init
"""
DragNotes Backend — Services Layer
====================================

What:  Business logic and persistence between routes (HTTP) and the database.
How:   Collaborators are passed in through constructors; dependencies.py
       builds them per request (stores) or once per process (token service,
       password hasher).

Service Inventory:
    - CredentialStore: user lookups and inserts
    - NoteStore: owner-scoped note persistence
    - PasswordHasher: bcrypt hashing (passlib)
    - TokenService: JWT issuance and verification (python-jose)
    - Authenticator: signup and login
    - AccessGuard: bearer token → AuthContext
    - NoteService: note CRUD, toggles and reorder
"""
