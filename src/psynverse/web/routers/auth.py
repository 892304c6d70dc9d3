from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from psynverse.core.modules.session.models import COOKIE_NAME, SESSION_DURATION, SessionPayload
from psynverse.web.deps import AppDep, SessionTokenDep
from psynverse.web.openapi import ErrorResponse, OkResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Admin credentials."""

    username: str = Field(..., description="Admin username")
    password: str = Field(..., description="Admin password")


@router.post(
    "/admin/login",
    summary="Log in as admin",
    description="Check the admin credentials and set the session cookie (valid for 12 hours).",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        500: {"model": ErrorResponse, "description": "Admin password is not configured"},
    },
)
async def login(login_data: LoginRequest, app: AppDep, response: Response) -> OkResponse:
    token = app.login(login_data.username, login_data.password)

    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=not app.config.debug,
        path="/",
        max_age=int(SESSION_DURATION.total_seconds()),
    )
    return OkResponse()


@router.post(
    "/admin/logout",
    summary="Log out",
    description="Clear the session cookie. Tokens are stateless, so nothing else is invalidated.",
    operation_id="logout",
)
async def logout(response: Response) -> OkResponse:
    response.delete_cookie(COOKIE_NAME, path="/")
    return OkResponse()


@router.get(
    "/admin/session",
    summary="Current session",
    description="Return the admin session carried by the cookie.",
    operation_id="getSession",
    responses={
        200: {"description": "Session payload"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_session(app: AppDep, token: SessionTokenDep) -> SessionPayload:
    return app.get_session(token)
