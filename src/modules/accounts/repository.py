"""Account repository for database operations."""

from datetime import UTC, datetime
from uuid import uuid4

import aiosqlite
import structlog

from src.infrastructure.database import Database
from src.modules.accounts.exceptions import AccountLookupError, DuplicateAccountError
from src.modules.accounts.models import Account

logger = structlog.get_logger()


class AccountRepository:
    """Repository for Account persistence.

    Emails are stored and queried lowercased.
    """

    def __init__(self, database: Database) -> None:
        """Initialize the repository.

        Args:
            database: Database connection.
        """
        self._db = database

    async def add(self, name: str, email: str, password_hash: str) -> Account:
        """Create a new account.

        Args:
            name: Display name.
            email: Login email address.
            password_hash: Digest of the account password.

        Returns:
            The created Account.

        Raises:
            DuplicateAccountError: If the email is already registered.
        """
        account = Account(
            id=str(uuid4()),
            name=name,
            email=email.lower(),
            password_hash=password_hash,
        )

        try:
            await self._db.execute(
                """
                INSERT INTO accounts (id, name, email, password_hash, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    account.id,
                    account.name,
                    account.email,
                    account.password_hash,
                    datetime.now(UTC).isoformat(),
                ),
            )
        except aiosqlite.IntegrityError as e:
            raise DuplicateAccountError(
                f"Account with email {account.email} already exists"
            ) from e

        logger.info("account_created", account_id=account.id, email=account.email)
        return account

    async def load_by_email(self, email: str) -> Account | None:
        """Load an account by email.

        Args:
            email: The account's email address.

        Returns:
            Account if found, None otherwise.

        Raises:
            AccountLookupError: If the database is unavailable or the query fails.
        """
        try:
            row = await self._db.fetch_one(
                "SELECT id, name, email, password_hash FROM accounts WHERE email = ?",
                (email.lower(),),
            )
        except (aiosqlite.Error, RuntimeError) as e:
            logger.error("account_lookup_failed", error=str(e))
            raise AccountLookupError("Account store unavailable") from e

        if row is None:
            return None

        return Account.from_row(dict(row))
