"""Account storage module."""

from src.modules.accounts.exceptions import (
    AccountLookupError,
    AccountRepositoryError,
    DuplicateAccountError,
)
from src.modules.accounts.models import Account
from src.modules.accounts.protocol import LoadAccountByEmailRepository
from src.modules.accounts.repository import AccountRepository

__all__ = [
    "Account",
    "AccountLookupError",
    "AccountRepository",
    "AccountRepositoryError",
    "DuplicateAccountError",
    "LoadAccountByEmailRepository",
]
