"""Exceptions for hashing and token operations."""


class CryptographyError(Exception):
    """Base exception for cryptography adapter errors."""

    def __init__(self, message: str, *, adapter: str = "unknown") -> None:
        self.adapter = adapter
        super().__init__(message)


class HashingError(CryptographyError):
    """Raised when a value cannot be hashed."""


class HashComparisonError(CryptographyError):
    """Raised when a digest cannot be compared (e.g. malformed hash)."""


class TokenGenerationError(CryptographyError):
    """Raised when an access token cannot be issued."""


class CryptographyConfigurationError(CryptographyError):
    """Raised when there's a configuration issue (e.g., missing secret)."""
