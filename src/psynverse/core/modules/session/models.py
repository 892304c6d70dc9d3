"""Session models."""

from datetime import UTC, datetime, timedelta
from typing import NewType

from pydantic import BaseModel, Field

SessionToken = NewType("SessionToken", str)

SESSION_DURATION = timedelta(hours=12)
COOKIE_NAME = "psynverse_session"


class SessionPayload(BaseModel):
    """Signed content of a session token."""

    username: str = Field(..., description="Authenticated admin username")
    exp: int = Field(..., description="Expiry as Unix epoch milliseconds")

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp / 1000, tz=UTC)
