"""Login module: credential verification and the login request handler."""

from src.modules.login.authentication import (
    Authenticated,
    AuthenticationResult,
    Credentials,
    DbAuthentication,
    NotAuthenticated,
)
from src.modules.login.controller import LoginController
from src.modules.login.decorators import LogControllerDecorator
from src.modules.login.errors import (
    InvalidParamError,
    MissingParamError,
    ServerError,
    UnauthorizedError,
)
from src.modules.login.factory import make_login_controller
from src.modules.login.http import HttpRequest, HttpResponse
from src.modules.login.protocol import Authentication, Controller

__all__ = [
    "Authenticated",
    "Authentication",
    "AuthenticationResult",
    "Controller",
    "Credentials",
    "DbAuthentication",
    "HttpRequest",
    "HttpResponse",
    "InvalidParamError",
    "LogControllerDecorator",
    "LoginController",
    "MissingParamError",
    "NotAuthenticated",
    "ServerError",
    "UnauthorizedError",
    "make_login_controller",
]
