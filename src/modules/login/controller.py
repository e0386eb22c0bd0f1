"""Login request handler."""

from src.infrastructure.validation import EmailValidator
from src.modules.login.authentication import Credentials, NotAuthenticated
from src.modules.login.errors import InvalidParamError, MissingParamError
from src.modules.login.http import (
    HttpRequest,
    HttpResponse,
    bad_request,
    server_error,
    success,
    unauthorized,
)
from src.modules.login.protocol import Authentication

REQUIRED_FIELDS = ("email", "password")


class LoginController:
    """Validates a login request and maps the outcome to an envelope.

    Every failure past field validation, including errors raised by the
    email validator or the authentication step, becomes a 500 envelope;
    ``handle`` never raises.
    """

    def __init__(
        self,
        email_validator: EmailValidator,
        authentication: Authentication,
    ) -> None:
        self._email_validator = email_validator
        self._authentication = authentication

    async def handle(self, request: HttpRequest) -> HttpResponse:
        """Handle a login request.

        Args:
            request: Request whose body should hold ``email`` and ``password``.

        Returns:
            400 for a missing or invalid field, 401 when the credentials do
            not match, 200 with ``accessToken`` on success, 500 otherwise.
        """
        try:
            body = request.body or {}

            for field_name in REQUIRED_FIELDS:
                if not body.get(field_name):
                    return bad_request(MissingParamError(field_name))

            email = body["email"]
            password = body["password"]

            if not self._email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))

            if not isinstance(password, str):
                return bad_request(InvalidParamError("password"))

            result = await self._authentication.authenticate(
                Credentials(email=email, password=password)
            )
            if isinstance(result, NotAuthenticated):
                return unauthorized()

            return success({"accessToken": result.access_token})
        except Exception as e:
            return server_error(e)
