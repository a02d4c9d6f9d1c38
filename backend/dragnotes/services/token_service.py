"""
DragNotes Backend — Token Service
===================================

What:  Issues and verifies signed, time-limited bearer tokens (JWT).
How:   python-jose with an HMAC algorithm (HS256 by default) and the
       server-held secret. Claims: {"sub": <user id>, "iat", "exp"}.
Who:   Authenticator (issue on login) and AccessGuard (verify per request).

Tokens are stateless: there is no revocation list, so a token stays valid
for its whole lifetime regardless of later account changes.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from dragnotes.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_in: int  # seconds


class TokenService:
    """
    Signs and verifies access tokens.

    Args:
        secret:      HMAC key. Must be identical on every process that
                     verifies tokens.
        algorithm:   JWS algorithm name (HS256/HS384/HS512).
        expires_in:  Token lifetime in seconds (default 24 hours).
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: int = 86_400):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, user_id: str, now: Optional[datetime] = None) -> IssuedToken:
        """Create a token whose `sub` claim is the given user identifier."""
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.expires_in),
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        return IssuedToken(token=token, expires_in=self.expires_in)

    def verify(self, token: str) -> str:
        """
        Verify signature and expiry and return the `sub` claim.

        Raises:
            AuthenticationError: expired, forged, malformed, or missing `sub`.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise AuthenticationError(reason="token expired")
        except JWTError as e:
            logger.debug("Token rejected: %s", e)
            raise AuthenticationError(reason="invalid token")

        subject = payload.get("sub")
        if not subject or not isinstance(subject, str):
            raise AuthenticationError(reason="token has no subject")
        return subject
