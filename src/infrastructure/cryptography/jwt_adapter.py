"""JWT access token adapter."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import structlog

from src.infrastructure.cryptography.exceptions import (
    CryptographyConfigurationError,
    TokenGenerationError,
)

logger = structlog.get_logger()


class JwtAdapter:
    """Token generator that issues signed JWTs.

    Tokens carry the account id as ``sub`` plus a random ``jti``, so two
    logins within the same second still yield distinct tokens.
    """

    ADAPTER_NAME = "jwt"

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        expire_hours: int = 24,
    ) -> None:
        """Initialize the adapter.

        Args:
            secret: Secret key for JWT signing.
            algorithm: Algorithm for JWT signing.
            expire_hours: Hours until token expiration.

        Raises:
            CryptographyConfigurationError: If the secret is empty.
        """
        if not secret:
            raise CryptographyConfigurationError(
                "JWT secret is required", adapter=self.ADAPTER_NAME
            )

        self._secret = secret
        self._algorithm = algorithm
        self._expire_hours = expire_hours

    async def generate(self, account_id: str) -> str:
        """Issue a signed token for an account.

        Args:
            account_id: Identifier of the authenticated account.

        Returns:
            The encoded JWT.

        Raises:
            TokenGenerationError: If signing fails.
        """
        now = datetime.now(UTC)
        expires = now + timedelta(hours=self._expire_hours)

        # JWT requires integer timestamps for exp and iat
        payload = {
            "sub": account_id,
            "jti": uuid4().hex,
            "exp": int(expires.timestamp()),
            "iat": int(now.timestamp()),
        }

        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError) as e:
            logger.error("token_generation_failed", error=str(e))
            raise TokenGenerationError(
                "Access token could not be issued", adapter=self.ADAPTER_NAME
            ) from e
