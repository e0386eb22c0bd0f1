#!/usr/bin/env python3
"""CLI script to create accounts for testing.

Usage:
    python scripts/create_account.py "Tony" tony@email.com 123
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add src to path so we can import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import Settings
from src.infrastructure.cryptography import BcryptAdapter, Hasher, HashingError
from src.infrastructure.database import init_database
from src.infrastructure.validation import EmailValidatorAdapter
from src.modules.accounts import Account, AccountRepository, DuplicateAccountError


async def create_account(
    repo: AccountRepository, hasher: Hasher, name: str, email: str, password: str
) -> Account:
    """Hash the password and store a new account.

    Args:
        repo: Account repository to insert into.
        hasher: Password hasher.
        name: Account display name.
        email: Login email address.
        password: Plaintext password (will be hashed).

    Returns:
        The created Account.

    Raises:
        HashingError: If the password cannot be hashed.
        DuplicateAccountError: If the email is already registered.
    """
    return await repo.add(
        name=name,
        email=email,
        password_hash=await hasher.hash(password),
    )


async def run(name: str, email: str, password: str) -> None:
    """Open the configured database and create the account."""
    settings = Settings()
    db = await init_database(settings.database_path)

    try:
        account = await create_account(
            AccountRepository(db),
            BcryptAdapter(rounds=settings.bcrypt_rounds),
            name,
            email,
            password,
        )

        print(f"✓ Created account: {account.email}")
        print(f"  Account ID: {account.id}")

    except (DuplicateAccountError, HashingError) as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        await db.disconnect()


def main() -> None:
    """Parse arguments and create the account."""
    parser = argparse.ArgumentParser(description="Create an account for testing")
    parser.add_argument("name", help="Account display name")
    parser.add_argument("email", help="Account email address")
    parser.add_argument("password", help="Account password")

    args = parser.parse_args()

    if not EmailValidatorAdapter().is_valid(args.email):
        print(f"✗ Error: invalid email address {args.email!r}", file=sys.stderr)
        sys.exit(1)

    asyncio.run(run(args.name, args.email, args.password))


if __name__ == "__main__":
    main()
