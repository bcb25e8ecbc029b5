"""Password hashing with bcrypt."""

from passlib.context import CryptContext
from passlib.exc import UnknownHashError


class PasswordHasher:
    """Salted, one-way password hashing.

    Cost factor is the bcrypt log-rounds value; every hash gets a fresh
    salt, so hashing the same password twice never yields the same digest.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )
        self._dummy_hash: str | None = None

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str | None) -> bool:
        """Verify a password against its hash.

        Malformed or unrecognised digests count as a mismatch.
        """
        if not password_hash:
            return False
        try:
            return self._context.verify(password, password_hash)
        except (UnknownHashError, ValueError, TypeError):
            return False

    def verify_dummy(self, password: str) -> bool:
        """Spend one verification on a throwaway hash. Always False.

        Used when there is no account to check against, so the caller
        takes as long as a real mismatch.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("dummy-password-for-timing")
        self.verify(password, self._dummy_hash)
        return False
