"""FastAPI dependency wiring for stores, services and the access guard.

Process-wide collaborators (token service, password hasher) are built once
from settings; stores are bound to the request's database session. Tests
replace any of these through ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from dragnotes.config import settings
from dragnotes.database import get_db_session
from dragnotes.services.access_guard import AccessGuard, AuthContext
from dragnotes.services.auth_service import Authenticator
from dragnotes.services.credential_store import CredentialStore
from dragnotes.services.note_service import NoteService
from dragnotes.services.note_store import NoteStore
from dragnotes.services.password_hasher import PasswordHasher
from dragnotes.services.token_service import TokenService


@lru_cache
def get_token_service() -> TokenService:
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=settings.token_expires_in,
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def get_credential_store(db: AsyncSession = Depends(get_db_session)) -> CredentialStore:
    return CredentialStore(db)


def get_note_store(db: AsyncSession = Depends(get_db_session)) -> NoteStore:
    return NoteStore(db)


def get_authenticator(
    store: CredentialStore = Depends(get_credential_store),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> Authenticator:
    return Authenticator(
        store=store,
        hasher=hasher,
        tokens=tokens,
        password_min_length=settings.password_min_length,
    )


def get_access_guard(
    tokens: TokenService = Depends(get_token_service),
    store: CredentialStore = Depends(get_credential_store),
) -> AccessGuard:
    return AccessGuard(tokens=tokens, store=store)


async def require_auth(
    authorization: Optional[str] = Header(default=None),
    guard: AccessGuard = Depends(get_access_guard),
) -> AuthContext:
    """Protected-route gate. Raises AuthenticationError (401) on any failure."""
    return await guard.authenticate(authorization)


def get_note_service(store: NoteStore = Depends(get_note_store)) -> NoteService:
    return NoteService(store)
