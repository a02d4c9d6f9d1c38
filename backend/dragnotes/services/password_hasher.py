"""
DragNotes Backend — Password Hashing
======================================

What:  Salted one-way password hashing with bcrypt through passlib.
How:   A passlib CryptContext configured with the work factor from settings.
       bcrypt is CPU-bound, so the async helpers push the work onto the
       threadpool instead of blocking the event loop.
"""

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool


class PasswordHasher:
    """Hashes and verifies passwords. Never logs or stores plaintext."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """False for a wrong password or an unrecognized/corrupt hash."""
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            return False

    async def hash_async(self, password: str) -> str:
        return await run_in_threadpool(self.hash, password)

    async def verify_async(self, password: str, password_hash: str) -> bool:
        return await run_in_threadpool(self.verify, password, password_hash)
