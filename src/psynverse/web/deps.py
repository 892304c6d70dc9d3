from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie

from psynverse.app import App
from psynverse.core.modules.session.models import COOKIE_NAME, SessionToken

cookie_scheme = APIKeyCookie(name=COOKIE_NAME, auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_session_token(
    app: Annotated[App, Depends(get_app)],
    token_cookie: Annotated[str | None, Depends(cookie_scheme)] = None,
) -> SessionToken:
    """Get the session token from the cookie, rejecting requests without a valid session."""
    app.get_session(token_cookie)
    return SessionToken(cast(str, token_cookie))


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
SessionTokenDep = Annotated[SessionToken, Depends(get_session_token)]
