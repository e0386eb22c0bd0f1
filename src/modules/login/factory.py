"""Wiring for the login controller."""

from src.config import Settings
from src.infrastructure.cryptography import BcryptAdapter, JwtAdapter
from src.infrastructure.database import Database
from src.infrastructure.validation import EmailValidatorAdapter
from src.modules.accounts import AccountRepository
from src.modules.login.authentication import DbAuthentication
from src.modules.login.controller import LoginController
from src.modules.login.decorators import LogControllerDecorator
from src.modules.login.protocol import Controller


def make_login_controller(database: Database, settings: Settings) -> Controller:
    """Build the production login controller.

    Args:
        database: Connected account database.
        settings: Application settings; ``jwt_secret_key`` must be set.

    Returns:
        A LoginController wrapped in LogControllerDecorator.

    Raises:
        CryptographyConfigurationError: If no JWT secret is configured.
    """
    secret = (
        settings.jwt_secret_key.get_secret_value() if settings.jwt_secret_key else ""
    )

    authentication = DbAuthentication(
        AccountRepository(database),
        BcryptAdapter(rounds=settings.bcrypt_rounds),
        JwtAdapter(
            secret,
            algorithm=settings.jwt_algorithm,
            expire_hours=settings.jwt_expire_hours,
        ),
    )
    controller = LoginController(EmailValidatorAdapter(), authentication)
    return LogControllerDecorator(controller)
