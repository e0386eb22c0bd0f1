"""Credential verification against the account store."""

from dataclasses import dataclass

import structlog

from src.infrastructure.cryptography import HashComparer, TokenGenerator
from src.infrastructure.observability import add_span_attributes, traced
from src.modules.accounts import LoadAccountByEmailRepository

logger = structlog.get_logger()


@dataclass(frozen=True)
class Credentials:
    """Email and password submitted for a single login attempt."""

    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"


@dataclass(frozen=True)
class Authenticated:
    """The credentials matched an account; carries the issued token."""

    access_token: str


@dataclass(frozen=True)
class NotAuthenticated:
    """No account matched the credentials."""


AuthenticationResult = Authenticated | NotAuthenticated


class DbAuthentication:
    """Verifies credentials and issues an access token on success.

    Runs lookup, hash comparison and token issuance strictly in that
    order and stops at the first step that rules the credentials out.
    Collaborator errors are not caught here. Holds no per-request state.
    """

    def __init__(
        self,
        load_account_by_email_repository: LoadAccountByEmailRepository,
        hash_comparer: HashComparer,
        token_generator: TokenGenerator,
    ) -> None:
        """Initialize the verifier.

        Args:
            load_account_by_email_repository: Account lookup by email.
            hash_comparer: Password/digest comparison.
            token_generator: Access token issuance.
        """
        self._load_account_by_email_repository = load_account_by_email_repository
        self._hash_comparer = hash_comparer
        self._token_generator = token_generator

    @traced("login.authenticate")
    async def authenticate(self, credentials: Credentials) -> AuthenticationResult:
        """Authenticate credentials.

        Args:
            credentials: Email and password, already shape-validated.

        Returns:
            Authenticated with a fresh token, or NotAuthenticated when the
            email is unknown or the password does not match.
        """
        account = await self._load_account_by_email_repository.load_by_email(
            credentials.email
        )

        if account is None:
            logger.info("auth_failed_account_not_found", email=credentials.email)
            add_span_attributes({"login.outcome": "not_authenticated"})
            return NotAuthenticated()

        is_valid = await self._hash_comparer.compare(
            credentials.password, account.password_hash
        )

        if not is_valid:
            logger.info("auth_failed_invalid_password", account_id=account.id)
            add_span_attributes({"login.outcome": "not_authenticated"})
            return NotAuthenticated()

        access_token = await self._token_generator.generate(account.id)

        logger.info("account_authenticated", account_id=account.id)
        add_span_attributes({"login.outcome": "authenticated"})
        return Authenticated(access_token=access_token)
