"""Exceptions for account persistence."""


class AccountRepositoryError(Exception):
    """Base exception for account store errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AccountLookupError(AccountRepositoryError):
    """Raised when the account store cannot be queried."""


class DuplicateAccountError(AccountRepositoryError):
    """Raised when an account with the same email already exists."""
