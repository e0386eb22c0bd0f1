"""Errors surfaced in login response envelopes."""


class MissingParamError(Exception):
    """A required request field is absent or empty."""

    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        super().__init__(f"Missing param: {param_name}")


class InvalidParamError(Exception):
    """A request field is present but malformed."""

    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        super().__init__(f"Invalid param: {param_name}")


class UnauthorizedError(Exception):
    """Credentials did not identify an account."""

    def __init__(self) -> None:
        super().__init__("Unauthorized")


class ServerError(Exception):
    """Wraps an unexpected failure caught at the controller boundary.

    The original exception is kept as ``cause`` (and ``__cause__``) so
    logging collaborators can report it; only the generic message is
    ever sent to the client.
    """

    def __init__(self, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__("Internal server error")
        self.__cause__ = cause
