import secrets

import structlog

from psynverse.core.core import Service
from psynverse.core.modules.session.models import SessionPayload, SessionToken
from psynverse.core.modules.session.tokens import create_session_token, validate_session_token
from psynverse.errors import AuthenticationError, ConfigurationError

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Issues and checks stateless admin session tokens."""

    async def on_start(self) -> None:
        """Refuse to start without a session secret."""
        if not self.core.config.session_secret:
            raise ConfigurationError("PSYNVERSE_SESSION_SECRET is not configured")

    def login(self, username: str, password: str) -> SessionToken:
        """Check credentials against the configured admin account and issue a token."""
        config = self.core.config
        if not config.admin_password:
            raise ConfigurationError("PSYNVERSE_ADMIN_PASSWORD is not configured")

        user_ok = secrets.compare_digest(username.encode("utf-8"), config.admin_user.encode("utf-8"))
        password_ok = secrets.compare_digest(password.encode("utf-8"), config.admin_password.encode("utf-8"))
        if not (user_ok and password_ok):
            logger.info("login_failed", username=username)
            raise AuthenticationError("Invalid credentials")

        logger.info("login_succeeded", username=username)
        return create_session_token(username, config.session_secret)

    def get_session(self, token: str | None) -> SessionPayload | None:
        return validate_session_token(token, self.core.config.session_secret)

    def ensure_authenticated(self, token: str | None) -> SessionPayload:
        """Return the session payload or raise AuthenticationError."""
        payload = self.get_session(token)
        if payload is None:
            raise AuthenticationError
        return payload
