"""Stateless signed session tokens.

A token is ``base64url(json payload) + "." + hex(HMAC-SHA256(secret, encoded payload))``.
Nothing is stored server side, so a token stays valid until its embedded expiry.
"""

import base64
import binascii
import hashlib
import hmac
import json
from datetime import datetime

from pydantic import ValidationError as PydanticValidationError

from psynverse.core.modules.session.models import SESSION_DURATION, SessionPayload, SessionToken
from psynverse.errors import ConfigurationError
from psynverse.utils import now as utc_now


def _require_secret(secret: str) -> bytes:
    if not secret:
        raise ConfigurationError("Session secret is not configured")
    return secret.encode("utf-8")


def _sign(encoded: str, key: bytes) -> str:
    return hmac.new(key, encoded.encode("utf-8"), hashlib.sha256).hexdigest()


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(data: str) -> bytes:
    return base64.urlsafe_b64decode(data + "=" * (-len(data) % 4))


def _epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def create_session_token(username: str, secret: str, now: datetime | None = None) -> SessionToken:
    """Create a signed token for ``username`` that expires twelve hours after ``now``."""
    issued_at = now or utc_now()
    payload = SessionPayload(username=username, exp=_epoch_ms(issued_at + SESSION_DURATION))
    encoded = _b64encode(payload.model_dump_json().encode("utf-8"))
    return SessionToken(f"{encoded}.{_sign(encoded, _require_secret(secret))}")


def validate_session_token(token: str | None, secret: str, now: datetime | None = None) -> SessionPayload | None:
    """Return the payload of a genuine, unexpired token and None for anything else.

    Only a missing secret raises; malformed, forged and expired tokens all read as "no session".
    """
    key = _require_secret(secret)
    if not token:
        return None

    encoded, separator, signature = token.rpartition(".")
    if not separator or not encoded or not signature:
        return None

    expected = _sign(encoded, key)
    if not hmac.compare_digest(signature.encode("utf-8"), expected.encode("ascii")):
        return None

    try:
        payload = SessionPayload.model_validate(json.loads(_b64decode(encoded)))
    except (binascii.Error, ValueError, PydanticValidationError):
        return None

    if _epoch_ms(now or utc_now()) >= payload.exp:
        return None
    return payload
