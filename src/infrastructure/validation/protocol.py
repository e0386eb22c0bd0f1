"""Protocol definition for email format validation."""

from typing import Protocol


class EmailValidator(Protocol):
    """Protocol for syntactic email address validation."""

    def is_valid(self, email: str) -> bool:
        """Check whether an email address is well-formed.

        Args:
            email: The address to check.

        Returns:
            True if the address is syntactically valid.
        """
        ...
