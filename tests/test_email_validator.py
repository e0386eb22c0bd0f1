"""Tests for the email validator adapter."""

import pytest

from src.infrastructure.validation import EmailValidatorAdapter


@pytest.mark.parametrize(
    "email",
    ["tony@email.com", "first.last+tag@sub.example.org"],
)
def test_valid_addresses(email: str) -> None:
    """Should accept well-formed addresses."""
    assert EmailValidatorAdapter().is_valid(email)


@pytest.mark.parametrize(
    "email",
    ["invalid_email", "tony@", "@email.com", "tony@@email.com", "tony @email.com"],
)
def test_invalid_addresses(email: str) -> None:
    """Should reject malformed addresses."""
    assert not EmailValidatorAdapter().is_valid(email)


def test_non_string_is_invalid() -> None:
    """Should reject values that are not strings."""
    assert not EmailValidatorAdapter().is_valid(123)  # type: ignore[arg-type]
