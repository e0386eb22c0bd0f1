"""Transport-agnostic request/response envelopes and their builders."""

from dataclasses import dataclass, field
from typing import Any

from src.modules.login.errors import ServerError, UnauthorizedError


@dataclass
class HttpRequest:
    """Inbound request as seen by a controller."""

    body: dict[str, Any] | None = None


@dataclass
class HttpResponse:
    """Response envelope.

    ``error`` carries the diagnostic exception for logging and takes no
    part in equality or serialization.
    """

    status_code: int
    body: dict[str, Any]
    error: Exception | None = field(default=None, compare=False, repr=False)


def bad_request(error: Exception) -> HttpResponse:
    return HttpResponse(status_code=400, body={"error": str(error)}, error=error)


def unauthorized() -> HttpResponse:
    error = UnauthorizedError()
    return HttpResponse(status_code=401, body={"error": str(error)}, error=error)


def server_error(error: Exception) -> HttpResponse:
    wrapped = ServerError(error)
    return HttpResponse(status_code=500, body={"error": str(wrapped)}, error=wrapped)


def success(data: dict[str, Any]) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)
