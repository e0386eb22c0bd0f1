"""Account domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Stored identity with a hashed password, keyed by email.

    Attributes:
        id: Unique account identifier.
        name: Display name.
        email: Email address used for login.
        password_hash: Bcrypt digest of the account password.
    """

    id: str
    name: str
    email: str
    password_hash: str

    @classmethod
    def from_row(cls, row: dict[str, object]) -> "Account":
        """Create an Account from a database row."""
        return cls(
            id=str(row["id"]),
            name=str(row["name"]),
            email=str(row["email"]),
            password_hash=str(row["password_hash"]),
        )
