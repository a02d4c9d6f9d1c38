"""
DragNotes Backend — Authenticator (Signup & Login)
====================================================

What:  Orchestrates signup (validate → uniqueness check → hash → persist)
       and login (lookup → hash compare → token issuance).
How:   Receives its collaborators explicitly: a CredentialStore bound to the
       request session, the process-wide PasswordHasher and TokenService.
Who:   Called by the /api/auth route handlers.

Login failures are deliberately generic towards the caller. The concrete
reason is logged for operators and carried in the exception context.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email

from dragnotes.exceptions import AuthenticationError, ConflictError, ValidationError
from dragnotes.models.user import User
from dragnotes.services.credential_store import CredentialStore
from dragnotes.services.password_hasher import PasswordHasher
from dragnotes.services.token_service import TokenService

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass(frozen=True)
class LoginResult:
    token: str
    expires_in: int
    user_id: str
    user: User


class Authenticator:
    """
    Signup and login.

    Args:
        store:                CredentialStore for this request.
        hasher:               PasswordHasher (bcrypt).
        tokens:               TokenService used to issue access tokens.
        password_min_length:  Minimum accepted password length.
    """

    def __init__(
        self,
        store: CredentialStore,
        hasher: PasswordHasher,
        tokens: TokenService,
        password_min_length: int = 6,
    ):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens
        self.password_min_length = password_min_length

    def _validate_signup(self, email: str, password: str) -> List[Dict[str, Any]]:
        errors: List[Dict[str, Any]] = []
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            errors.append({
                "loc": ["body", "email"],
                "msg": "Please enter a valid email",
                "type": "value_error",
            })
        if password is None or len(password) < self.password_min_length:
            errors.append({
                "loc": ["body", "password"],
                "msg": f"Password must be at least {self.password_min_length} characters long",
                "type": "value_error",
            })
        return errors

    async def signup(
        self,
        email: str,
        password: str,
        username: Optional[str] = None,
    ) -> User:
        """
        Register a new user.

        Returns:
            The persisted User (id assigned).

        Raises:
            ValidationError: malformed email or too-short password.
            ConflictError: the normalized email is already registered.
        """
        email = normalize_email(email or "")
        errors = self._validate_signup(email, password)
        if errors:
            raise ValidationError(errors=errors)

        if await self.store.find_by_email(email) is not None:
            logger.info("Signup rejected: email already registered")
            raise ConflictError(context={"email": email})

        if username is not None:
            username = username.strip() or None

        user = User(
            email=email,
            username=username,
            password_hash=await self.hasher.hash_async(password),
        )
        await self.store.add(user)
        logger.info("User created: %s", user.id)
        return user

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Verify credentials and issue an access token.

        Raises:
            AuthenticationError: unknown email or wrong password (same
                message for both).
        """
        email = normalize_email(email or "")
        user = await self.store.find_by_email(email)
        if user is None:
            logger.info("Login failed: user not found")
            raise AuthenticationError(reason="user not found")

        if not password or not await self.hasher.verify_async(password, user.password_hash):
            logger.info("Login failed for user %s: invalid password", user.id)
            raise AuthenticationError(reason="invalid password")

        issued = self.tokens.issue(str(user.id))
        logger.info("User %s logged in", user.id)
        return LoginResult(
            token=issued.token,
            expires_in=issued.expires_in,
            user_id=str(user.id),
            user=user,
        )
