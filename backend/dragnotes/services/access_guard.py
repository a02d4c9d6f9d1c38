"""
DragNotes Backend — Access Guard
==================================

What:  Gate for protected routes: bearer token → verified claim → live user.
How:   Parses the raw Authorization header, verifies the token through the
       TokenService and resolves the user through the CredentialStore.
       Returns an explicit AuthContext that route handlers pass into the
       NoteService; nothing is stashed on the request object.

Every failure is an AuthenticationError (HTTP 401). There is no retry and no
fallback authentication path.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi.security.utils import get_authorization_scheme_param

from dragnotes.exceptions import AuthenticationError
from dragnotes.models.user import User
from dragnotes.services.credential_store import CredentialStore
from dragnotes.services.token_service import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthContext:
    """The authenticated caller. Notes are always scoped by `user_id`."""

    user_id: uuid.UUID
    user: User


class AccessGuard:
    def __init__(self, tokens: TokenService, store: CredentialStore):
        self.tokens = tokens
        self.store = store

    @staticmethod
    def extract_bearer_token(authorization: Optional[str]) -> str:
        """
        Return the credential of a `Bearer <token>` header value.

        Raises:
            AuthenticationError: header absent, wrong scheme, or empty token.
        """
        if not authorization:
            raise AuthenticationError(reason="authorization header missing")
        scheme, token = get_authorization_scheme_param(authorization)
        if scheme.lower() != "bearer" or not token.strip():
            raise AuthenticationError(reason="authorization header malformed")
        return token.strip()

    async def authenticate(self, authorization: Optional[str]) -> AuthContext:
        token = self.extract_bearer_token(authorization)
        subject = self.tokens.verify(token)

        try:
            user_id = uuid.UUID(subject)
        except ValueError:
            raise AuthenticationError(reason="token subject is not a user id")

        # The account may have been removed while the token is still valid
        user = await self.store.get_by_id(user_id)
        if user is None:
            logger.warning("Token presented for unknown user %s", user_id)
            raise AuthenticationError(reason="user not found")

        return AuthContext(user_id=user.id, user=user)
