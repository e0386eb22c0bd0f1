"""Login API route."""

from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from src.modules.login.http import HttpRequest
from src.modules.login.protocol import Controller
from src.modules.login.schemas import AccessTokenResponse, ErrorResponse

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["login"])


_login_controller: Controller | None = None


def get_login_controller() -> Controller:
    """Get the login controller instance.

    Raises:
        HTTPException: 503 if the controller has not been configured.
    """
    if _login_controller is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Login service not configured",
        )
    return _login_controller


def set_login_controller(controller: Controller | None) -> None:
    """Set the login controller instance.

    Called during app startup to configure the route.
    """
    global _login_controller
    _login_controller = controller


async def _read_body(request: Request) -> dict[str, Any]:
    try:
        payload = await request.json()
    except ValueError:
        logger.info("login_body_not_json")
        return {}
    return payload if isinstance(payload, dict) else {}


@router.post(
    "/login",
    summary="Login with email and password",
    description="Authenticate and receive an access token.",
    responses={
        200: {"model": AccessTokenResponse},
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def login(
    request: Request,
    controller: Annotated[Controller, Depends(get_login_controller)],
) -> JSONResponse:
    """Adapt the HTTP request to the login controller and back."""
    body = await _read_body(request)
    response = await controller.handle(HttpRequest(body=body))
    return JSONResponse(status_code=response.status_code, content=response.body)
