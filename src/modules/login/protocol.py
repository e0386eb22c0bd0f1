"""Protocol definitions for the login pipeline."""

from typing import Protocol

from src.modules.login.authentication import AuthenticationResult, Credentials
from src.modules.login.http import HttpRequest, HttpResponse


class Authentication(Protocol):
    """Protocol for credential verification."""

    async def authenticate(self, credentials: Credentials) -> AuthenticationResult:
        """Decide whether credentials identify an account.

        Args:
            credentials: Email and password, already shape-validated.

        Returns:
            Authenticated with a fresh access token, or NotAuthenticated.
        """
        ...


class Controller(Protocol):
    """Protocol for request handlers exposed to the transport layer."""

    async def handle(self, request: HttpRequest) -> HttpResponse:
        """Turn a request into a response envelope. Never raises."""
        ...
