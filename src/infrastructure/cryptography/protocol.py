"""Protocol definitions for password hashing and token issuance."""

from typing import Protocol


class Hasher(Protocol):
    """Protocol for one-way password hashing."""

    async def hash(self, plaintext: str) -> str:
        """Hash a plaintext value.

        Args:
            plaintext: The value to hash.

        Returns:
            The salted digest.

        Raises:
            HashingError: If hashing fails.
        """
        ...


class HashComparer(Protocol):
    """Protocol for comparing a plaintext value against a stored digest.

    A mismatch is a normal ``False`` result. Implementations only raise
    when the comparison mechanism itself fails.
    """

    async def compare(self, plaintext: str, digest: str) -> bool:
        """Check whether a plaintext value matches a digest.

        Args:
            plaintext: The candidate value (e.g. a submitted password).
            digest: The stored digest to compare against.

        Returns:
            True if the value matches, False otherwise.

        Raises:
            HashComparisonError: If the digest cannot be compared.
        """
        ...


class TokenGenerator(Protocol):
    """Protocol for issuing opaque access tokens."""

    async def generate(self, account_id: str) -> str:
        """Issue a new access token for an account.

        Args:
            account_id: Identifier of the authenticated account.

        Returns:
            The encoded access token.

        Raises:
            TokenGenerationError: If the token cannot be issued.
        """
        ...
