"""Tests for password hashing and token adapters."""

import jwt
import pytest

from src.infrastructure.cryptography import (
    BcryptAdapter,
    CryptographyConfigurationError,
    HashComparisonError,
    HashingError,
    JwtAdapter,
    TokenGenerationError,
)

SECRET = "test-secret-key-for-testing-only"


@pytest.fixture
def bcrypt_adapter() -> BcryptAdapter:
    return BcryptAdapter(rounds=4)


class TestBcryptAdapter:
    """Tests for BcryptAdapter."""

    async def test_hash(self, bcrypt_adapter: BcryptAdapter) -> None:
        """Should hash with a bcrypt prefix."""
        hashed = await bcrypt_adapter.hash("secure_password123")

        assert hashed != "secure_password123"
        assert hashed.startswith("$2")

    async def test_compare_correct(self, bcrypt_adapter: BcryptAdapter) -> None:
        """Should match the original password."""
        hashed = await bcrypt_adapter.hash("123")

        assert await bcrypt_adapter.compare("123", hashed)

    async def test_compare_incorrect(self, bcrypt_adapter: BcryptAdapter) -> None:
        """Should report a mismatch as False, not an error."""
        hashed = await bcrypt_adapter.hash("correct_password")

        assert not await bcrypt_adapter.compare("wrong_password", hashed)

    async def test_different_hashes_for_same_password(
        self, bcrypt_adapter: BcryptAdapter
    ) -> None:
        """Should salt every hash."""
        hash1 = await bcrypt_adapter.hash("same_password")
        hash2 = await bcrypt_adapter.hash("same_password")

        assert hash1 != hash2

    async def test_compare_overlong_password(
        self, bcrypt_adapter: BcryptAdapter
    ) -> None:
        """Should report a password over 72 bytes as a mismatch."""
        hashed = await bcrypt_adapter.hash("123")

        assert await bcrypt_adapter.compare("a" * 80, hashed) is False

    async def test_hash_overlong_password(self, bcrypt_adapter: BcryptAdapter) -> None:
        """Should refuse to hash a password over 72 bytes."""
        with pytest.raises(HashingError):
            await bcrypt_adapter.hash("a" * 80)

    async def test_compare_malformed_hash(self, bcrypt_adapter: BcryptAdapter) -> None:
        """Should raise HashComparisonError for a digest bcrypt cannot parse."""
        with pytest.raises(HashComparisonError) as exc_info:
            await bcrypt_adapter.compare("123", "not-a-bcrypt-hash")

        assert exc_info.value.adapter == "bcrypt"
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestJwtAdapter:
    """Tests for JwtAdapter."""

    async def test_generate_encodes_account_id(self) -> None:
        """Should sign a token whose subject is the account id."""
        adapter = JwtAdapter(SECRET, expire_hours=1)

        token = await adapter.generate("any_id")

        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert payload["sub"] == "any_id"
        assert payload["exp"] - payload["iat"] == 3600

    async def test_generate_fresh_tokens(self) -> None:
        """Should issue a different token on every call."""
        adapter = JwtAdapter(SECRET)

        first = await adapter.generate("any_id")
        second = await adapter.generate("any_id")

        assert first != second

    def test_missing_secret(self) -> None:
        """Should refuse to build without a secret."""
        with pytest.raises(CryptographyConfigurationError):
            JwtAdapter("")

    async def test_unsupported_algorithm(self) -> None:
        """Should raise TokenGenerationError when signing fails."""
        adapter = JwtAdapter(SECRET, algorithm="not-an-algorithm")

        with pytest.raises(TokenGenerationError):
            await adapter.generate("any_id")
