"""Input validation adapters."""

from src.infrastructure.validation.email_adapter import EmailValidatorAdapter
from src.infrastructure.validation.protocol import EmailValidator

__all__ = [
    "EmailValidator",
    "EmailValidatorAdapter",
]
