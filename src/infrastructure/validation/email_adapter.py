"""Email validator backed by the email-validator library."""

from email_validator import EmailNotValidError, validate_email


class EmailValidatorAdapter:
    """Syntactic email validation without DNS deliverability checks."""

    def is_valid(self, email: str) -> bool:
        """Check whether an email address is well-formed.

        Args:
            email: The address to check.

        Returns:
            True if the address parses, False otherwise.
        """
        if not isinstance(email, str):
            return False

        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
