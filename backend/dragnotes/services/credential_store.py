"""
DragNotes Backend — Credential Store
======================================

What:  Persistence of user identity records.
How:   Thin wrapper over an AsyncSession. Writes are flushed (so ids and
       constraint violations surface immediately) and committed by the
       request-scoped session dependency.
"""

import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dragnotes.exceptions import ConflictError, InternalError
from dragnotes.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """User lookups and inserts. Emails are expected already normalized."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_email(self, email: str) -> Optional[User]:
        try:
            result = await self._session.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error looking up user by email: %s", e, exc_info=True)
            raise InternalError(context={"operation": "find_by_email"})

    async def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        try:
            return await self._session.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching user %s: %s", user_id, e, exc_info=True)
            raise InternalError(context={"operation": "get_by_id", "user_id": str(user_id)})

    async def add(self, user: User) -> User:
        """
        Insert a new user.

        Raises:
            ConflictError: the unique email index rejected the row (a
                concurrent signup won the race after our existence check).
        """
        self._session.add(user)
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            raise ConflictError(context={"email": user.email})
        except SQLAlchemyError as e:
            logger.error("Database error creating user: %s", e, exc_info=True)
            raise InternalError(context={"operation": "add_user"})
        return user
