"""Password hashing and access token adapters."""

from src.infrastructure.cryptography.bcrypt_adapter import BcryptAdapter
from src.infrastructure.cryptography.exceptions import (
    CryptographyConfigurationError,
    CryptographyError,
    HashComparisonError,
    HashingError,
    TokenGenerationError,
)
from src.infrastructure.cryptography.jwt_adapter import JwtAdapter
from src.infrastructure.cryptography.protocol import (
    HashComparer,
    Hasher,
    TokenGenerator,
)

__all__ = [
    "BcryptAdapter",
    "CryptographyConfigurationError",
    "CryptographyError",
    "HashComparer",
    "HashComparisonError",
    "Hasher",
    "HashingError",
    "JwtAdapter",
    "TokenGenerationError",
    "TokenGenerator",
]
