"""Protocol definitions for account persistence."""

from typing import Protocol

from src.modules.accounts.models import Account


class LoadAccountByEmailRepository(Protocol):
    """Protocol for looking up an account by its email address."""

    async def load_by_email(self, email: str) -> Account | None:
        """Load the account registered under an email address.

        Args:
            email: The email address to look up.

        Returns:
            The Account if one exists, None otherwise.

        Raises:
            AccountLookupError: If the store cannot be queried.
        """
        ...
