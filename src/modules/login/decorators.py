"""Controller decorators."""

import structlog

from src.modules.login.errors import ServerError
from src.modules.login.http import HttpRequest, HttpResponse
from src.modules.login.protocol import Controller

logger = structlog.get_logger()


class LogControllerDecorator:
    """Logs the underlying failure of any 500 response a controller returns."""

    def __init__(self, controller: Controller) -> None:
        self._controller = controller

    async def handle(self, request: HttpRequest) -> HttpResponse:
        response = await self._controller.handle(request)

        if response.status_code == 500:
            error = response.error
            cause = error.cause if isinstance(error, ServerError) else error
            logger.error(
                "controller_server_error",
                controller=type(self._controller).__name__,
                error_type=type(cause).__name__ if cause else None,
                error=str(cause) if cause else None,
                exc_info=cause,
            )

        return response
