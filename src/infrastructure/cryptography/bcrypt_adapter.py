"""Bcrypt password hashing adapter."""

import asyncio

import bcrypt
import structlog

from src.infrastructure.cryptography.exceptions import (
    HashComparisonError,
    HashingError,
)

logger = structlog.get_logger()


class BcryptAdapter:
    """Password hasher and comparer backed by bcrypt.

    Bcrypt is CPU-bound, so both operations run in a worker thread to
    keep the event loop responsive.
    """

    ADAPTER_NAME = "bcrypt"

    # bcrypt only covers the first 72 bytes of a password
    MAX_PASSWORD_BYTES = 72

    def __init__(self, *, rounds: int = 12) -> None:
        """Initialize the adapter.

        Args:
            rounds: Bcrypt cost factor (log2 of the iteration count).
        """
        self._rounds = rounds

    async def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh salt.

        Args:
            plaintext: Password to hash.

        Returns:
            The bcrypt digest as a string.

        Raises:
            HashingError: If the password is longer than bcrypt accepts.
        """
        if len(plaintext.encode("utf-8")) > self.MAX_PASSWORD_BYTES:
            raise HashingError(
                f"Password exceeds {self.MAX_PASSWORD_BYTES} bytes",
                adapter=self.ADAPTER_NAME,
            )

        try:
            return await asyncio.to_thread(self._hash_sync, plaintext)
        except ValueError as e:
            raise HashingError(str(e), adapter=self.ADAPTER_NAME) from e

    async def compare(self, plaintext: str, digest: str) -> bool:
        """Compare a password against a bcrypt digest.

        Args:
            plaintext: Submitted password.
            digest: Stored bcrypt digest.

        Returns:
            True if the password matches the digest. A password longer
            than bcrypt accepts never matches.

        Raises:
            HashComparisonError: If the digest is not a valid bcrypt hash.
        """
        try:
            return await asyncio.to_thread(self._compare_sync, plaintext, digest)
        except ValueError as e:
            logger.warning("hash_compare_failed", error=str(e))
            raise HashComparisonError(
                "Stored digest could not be compared", adapter=self.ADAPTER_NAME
            ) from e

    def _hash_sync(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    def _compare_sync(self, plaintext: str, digest: str) -> bool:
        password = plaintext.encode("utf-8")
        if len(password) > self.MAX_PASSWORD_BYTES:
            return False
        return bcrypt.checkpw(password, digest.encode("utf-8"))
